# Copyright 2016 Google Inc. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Common stateful utilities for the adl analytics tool."""

from adlsdk.api_lib.util import apis
from adlsdk.core import http
from adlsdk.core import properties

API_NAME = 'datalakeanalytics'
API_VERSION = '2016-03-20-preview'


def GetMessagesModule():
  return apis.GetMessagesModule(API_NAME, API_VERSION)


class DataLakeAnalytics(object):
  """Stateful utility for calling the Data Lake Analytics job APIs.

  The client is created on first use and reused for the lifetime of the
  object, so one instance corresponds to one account.
  """

  def __init__(self, account, cmd_path=None):
    super(DataLakeAnalytics, self).__init__()
    self.account = account
    self.cmd_path = cmd_path
    self._client = None

  @property
  def endpoint(self):
    endpoint = properties.VALUES.datalake_analytics.endpoint.Get()
    if endpoint:
      return endpoint if endpoint.endswith('/') else endpoint + '/'
    return 'https://{account}.{suffix}/'.format(
        account=self.account,
        suffix=properties.VALUES.datalake_analytics.dns_suffix.Get())

  @property
  def client(self):
    if self._client is None:
      headers = {'user-agent': http.MakeUserAgentString(self.cmd_path)}
      headers.update(http.AuthHeaders())
      self._client = apis.GetClientInstance(
          API_NAME, API_VERSION, self.endpoint,
          additional_http_headers=headers)
    return self._client

  @property
  def messages(self):
    return GetMessagesModule()

  @property
  def api_version(self):
    return API_VERSION
