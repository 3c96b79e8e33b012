"""Generated client library for datalakeanalytics version 2016-03-20-preview."""
# NOTE: This file is autogenerated and should not be edited by hand.

from apitools.base.py import base_api
from adlsdk.third_party.apis.datalakeanalytics.v2016_03_20_preview import datalakeanalytics_v2016_03_20_preview_messages as messages


class DatalakeanalyticsV20160320Preview(base_api.BaseApiClient):
  """Generated client library for service datalakeanalytics version 2016-03-20-preview."""

  MESSAGES_MODULE = messages
  BASE_URL = 'https://azuredatalakeanalytics.net/'

  _PACKAGE = 'datalakeanalytics'
  _SCOPES = ['https://datalake.azure.net/']
  _VERSION = '2016-03-20-preview'
  _CLIENT_ID = ''
  _CLIENT_SECRET = ''
  _USER_AGENT = 'adlsdk'
  _CLIENT_CLASS_NAME = 'DatalakeanalyticsV20160320Preview'
  _URL_VERSION = '2016-03-20-preview'
  _API_KEY = None

  def __init__(self, url='', credentials=None,
               get_credentials=True, http=None, model=None,
               log_request=False, log_response=False,
               credentials_args=None, default_global_params=None,
               additional_http_headers=None, response_encoding=None):
    """Create a new datalakeanalytics handle."""
    url = url or self.BASE_URL
    super(DatalakeanalyticsV20160320Preview, self).__init__(
        url, credentials=credentials,
        get_credentials=get_credentials, http=http, model=model,
        log_request=log_request, log_response=log_response,
        credentials_args=credentials_args,
        default_global_params=default_global_params,
        additional_http_headers=additional_http_headers,
        response_encoding=response_encoding)
    self.jobs = self.JobsService(self)

  class JobsService(base_api.BaseApiService):
    """Service class for the jobs resource."""

    _NAME = 'jobs'

    def __init__(self, client):
      super(DatalakeanalyticsV20160320Preview.JobsService, self).__init__(client)
      self._upload_configs = {
          }

    def Build(self, request, global_params=None):
      r"""Builds (compiles) the specified job in the specified Data Lake Analytics account for job correctness and validation.

      Args:
        request: (DatalakeanalyticsJobsBuildRequest) input message
        global_params: (StandardQueryParameters, default: None) global arguments
      Returns:
        (JobInformation) The response message.
      """
      config = self.GetMethodConfig('Build')
      return self._RunMethod(
          config, request, global_params=global_params)

    Build.method_config = lambda: base_api.ApiMethodInfo(
        http_method='POST',
        method_id='datalakeanalytics.jobs.build',
        ordered_params=[],
        path_params=[],
        query_params=['api-version'],
        relative_path='BuildJob',
        request_field='jobInformation',
        request_type_name='DatalakeanalyticsJobsBuildRequest',
        response_type_name='JobInformation',
        supports_download=False,
    )

    def Create(self, request, global_params=None):
      r"""Submits a job to the specified Data Lake Analytics account.

      Args:
        request: (DatalakeanalyticsJobsCreateRequest) input message
        global_params: (StandardQueryParameters, default: None) global arguments
      Returns:
        (JobInformation) The response message.
      """
      config = self.GetMethodConfig('Create')
      return self._RunMethod(
          config, request, global_params=global_params)

    Create.method_config = lambda: base_api.ApiMethodInfo(
        http_method='PUT',
        method_id='datalakeanalytics.jobs.create',
        ordered_params=['jobIdentity'],
        path_params=['jobIdentity'],
        query_params=['api-version'],
        relative_path='Jobs/{jobIdentity}',
        request_field='jobInformation',
        request_type_name='DatalakeanalyticsJobsCreateRequest',
        response_type_name='JobInformation',
        supports_download=False,
    )
