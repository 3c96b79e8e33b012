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

"""A module to get an http object and the headers sent with every request."""

import platform
import uuid

import httplib2

from adlsdk.core import config
from adlsdk.core import properties


def Http(timeout=None):
  """Returns the httplib2.Http transport used for service calls.

  Credentials are not attached here.  They travel as a request header, see
  AuthHeaders().

  Args:
    timeout: float, Socket timeout in seconds.  Defaults to the
      core/http_timeout property, or 300 when that is unset.
  """
  return httplib2.Http(timeout=timeout or GetDefaultTimeout())


def MakeUserAgentString(cmd_path=None):
  """Returns the user agent sent with service calls.

  Args:
    cmd_path: str, The dotted path of the running command, such as
      adl.analytics.jobs.submit.
  """
  return ('adl/{version}'
          ' command/{cmd}'
          ' invocation-id/{inv_id}'
          ' python/{py_version}').format(
              version=config.SDK_VERSION,
              cmd=cmd_path or 'unknown',
              inv_id=uuid.uuid4().hex,
              py_version=platform.python_version())


def AuthHeaders():
  """Returns the Authorization header for the configured access token, if any.
  """
  token = properties.VALUES.auth.access_token.Get()
  if not token:
    return {}
  return {'Authorization': 'Bearer {0}'.format(token)}


def GetDefaultTimeout():
  return properties.VALUES.core.http_timeout.GetInt() or 300
