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

"""Maps an API name and version to its generated client and messages."""

import importlib

from adlsdk.core import exceptions
from adlsdk.core import http


_BASE_PKG = 'adlsdk.third_party.apis'

# api name -> {api version -> module version label}
_APIS_MAP = {
    'datalakeanalytics': {
        '2016-03-20-preview': 'v2016_03_20_preview',
    },
}


class UnknownAPIError(exceptions.Error):
  """Unable to find API in APIs map."""

  def __init__(self, api_name):
    super(UnknownAPIError, self).__init__(
        'API named [{0}] does not exist in the APIs map'.format(api_name))


class UnknownVersionError(exceptions.Error):
  """Unable to find API version in APIs map."""

  def __init__(self, api_name, api_version):
    super(UnknownVersionError, self).__init__(
        'The [{0}] API does not have version [{1}] in the APIs map'.format(
            api_name, api_version))


def _CamelCase(snake_case):
  parts = snake_case.split('_')
  return ''.join(s.capitalize() for s in parts)


def _GetVersionLabel(api_name, api_version):
  if api_name not in _APIS_MAP:
    raise UnknownAPIError(api_name)
  versions = _APIS_MAP[api_name]
  if api_version not in versions:
    raise UnknownVersionError(api_name, api_version)
  return versions[api_version]


def _ModulePrefix(api_name, api_version):
  label = _GetVersionLabel(api_name, api_version)
  return '{base}.{api_name}.{label}.{api_name}_{label}_'.format(
      base=_BASE_PKG, api_name=api_name, label=label)


def GetMessagesModule(api_name, api_version):
  """Returns the messages module for an API.

  Args:
    api_name: str, The API name.
    api_version: str, The version of the API.

  Returns:
    module, The generated messages module.
  """
  return importlib.import_module(
      _ModulePrefix(api_name, api_version) + 'messages')


def GetClientClass(api_name, api_version):
  """Returns the generated client class for an API version.

  Args:
    api_name: str, The API name.
    api_version: str, The version of the API.

  Returns:
    base_api.BaseApiClient, Client class for the specified API.
  """
  module = importlib.import_module(
      _ModulePrefix(api_name, api_version) + 'client')
  client_class_name = _CamelCase(api_name) + _CamelCase(
      _GetVersionLabel(api_name, api_version))
  return getattr(module, client_class_name)


def GetClientInstance(api_name, api_version, url, no_http=False,
                      additional_http_headers=None):
  """Creates a client for an API version that talks to url.

  Args:
    api_name: str, The API name.
    api_version: str, The version of the API.
    url: str, The service endpoint the client talks to.
    no_http: bool, True to not create an http object for this client.
    additional_http_headers: {str: str}, Headers sent with every request.

  Returns:
    base_api.BaseApiClient, An instance of the specified API client.
  """
  client_class = GetClientClass(api_name, api_version)
  return client_class(
      url=url,
      get_credentials=False,
      http=None if no_http else http.Http(),
      additional_http_headers=additional_http_headers)
