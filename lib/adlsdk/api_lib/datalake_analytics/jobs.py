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

"""Submits U-SQL and Hive jobs to a Data Lake Analytics account."""

from adlsdk.api_lib.datalake_analytics import exceptions
from adlsdk.api_lib.datalake_analytics import job_properties
from adlsdk.api_lib.datalake_analytics import util
from adlsdk.core import log

DEFAULT_DEGREE_OF_PARALLELISM = 1
DEFAULT_PRIORITY = 1000


def BuildJobInformation(messages, job_id, name, properties,
                        degree_of_parallelism=DEFAULT_DEGREE_OF_PARALLELISM,
                        priority=DEFAULT_PRIORITY):
  """Returns the JobInformation sent to the service for a new job."""
  return messages.JobInformation(
      jobId=job_id,
      name=name,
      properties=properties,
      type=messages.JobInformation.TypeValueValuesEnum.lookup_by_name(
          properties.type.name),
      degreeOfParallelism=degree_of_parallelism,
      priority=priority)


@util.HandleHttpError
def Dispatch(analytics, job, compile_only=False):
  """Sends job to the service.

  Args:
    analytics: analytics.DataLakeAnalytics, The account to talk to.
    job: JobInformation, The job to build or submit.
    compile_only: bool, True to only build (compile) the job.

  Raises:
    RemoteServiceError: If the service rejects the request.

  Returns:
    JobInformation, The job as recorded by the service.
  """
  messages = analytics.messages
  if compile_only:
    log.info('Building job [%s].', job.jobId)
    request = messages.DatalakeanalyticsJobsBuildRequest(
        apiVersion=analytics.api_version,
        jobInformation=job)
    return analytics.client.jobs.Build(request)
  log.info('Submitting job [%s].', job.jobId)
  request = messages.DatalakeanalyticsJobsCreateRequest(
      apiVersion=analytics.api_version,
      jobIdentity=job.jobId,
      jobInformation=job)
  return analytics.client.jobs.Create(request)


def SubmitJob(analytics, job_id_source, name, job_type, script=None,
              script_path=None, runtime=None, compile_mode=None,
              compile_only=False,
              degree_of_parallelism=DEFAULT_DEGREE_OF_PARALLELISM,
              priority=DEFAULT_PRIORITY, configurations=None):
  """Builds or submits a job.

  All input is validated before anything is sent to the service, and a job ID
  is only taken from job_id_source once the request is known to be valid.

  Args:
    analytics: analytics.DataLakeAnalytics, The account to submit to.
    job_id_source: util.JobIdSource, Where the job ID comes from.
    name: str, The friendly name of the job.
    job_type: str, USql or Hive, matched case insensitively.
    script: str, The inline script text.
    script_path: str, The path of the script file.  Exactly one of script and
      script_path must be given.
    runtime: str, The runtime version, if any.
    compile_mode: str, The U-SQL compile mode, if any.
    compile_only: bool, True to build the job without running it.
    degree_of_parallelism: int, The degree of parallelism of the job.
    priority: int, The job priority.  Lower numbers run first.
    configurations: {str: object}, Custom Hive configurations.

  Raises:
    AmbiguousInputError: If not exactly one of script and script_path is set.
    InvalidJobTypeError: If job_type is not a known type.
    UnsupportedOperationError: If a Hive job is to be built only.
    ScriptNotFoundError: If script_path does not name a file.
    RemoteServiceError: If the service rejects the request.

  Returns:
    JobInformation, The job as recorded by the service.
  """
  messages = analytics.messages
  util.ValidateScriptSource(script, script_path)
  parsed_type = util.ParseJobType(messages, job_type)
  if (compile_only and
      parsed_type == messages.JobProperties.TypeValueValuesEnum.Hive):
    raise exceptions.UnsupportedOperationError(
        'Hive jobs cannot be built with [--compile-only]; only U-SQL jobs '
        'support compilation without execution.')

  if script_path:
    script = util.ReadScript(script_path)

  properties = job_properties.BuildJobProperties(
      messages, parsed_type, script,
      runtime=runtime,
      compile_mode=compile_mode,
      configurations=configurations)
  job = BuildJobInformation(
      messages, job_id_source.Next(), name, properties,
      degree_of_parallelism=degree_of_parallelism,
      priority=priority)
  return Dispatch(analytics, job, compile_only=compile_only)
