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

"""Builders for the job type specific JobProperties payloads.

JobProperties is a union discriminated by its type field: U-SQL jobs carry a
compile mode, Hive jobs carry custom configurations.  Every job type has
exactly one builder registered in _BUILDERS.
"""

from apitools.base.py import encoding

from adlsdk.api_lib.datalake_analytics import analytics
from adlsdk.api_lib.datalake_analytics import exceptions
from adlsdk.api_lib.datalake_analytics import util
from adlsdk.core import exceptions as core_exceptions
from adlsdk.core import log
from adlsdk.core import properties


def _BuildUSqlProperties(messages, script, runtime=None, compile_mode=None,
                         configurations=None):
  """Returns the JobProperties of a U-SQL job."""
  job_properties = messages.JobProperties(
      type=messages.JobProperties.TypeValueValuesEnum.USql,
      script=script)
  parsed_mode = util.ParseCompileMode(messages, compile_mode)
  if parsed_mode is not None:
    job_properties.compileMode = parsed_mode
  if configurations:
    log.warning('U-SQL jobs do not support custom configurations, ignoring '
                '[--configurations].')
  if runtime:
    job_properties.runtimeVersion = runtime
  return job_properties


def _BuildHiveProperties(messages, script, runtime=None, compile_mode=None,
                         configurations=None):
  """Returns the JobProperties of a Hive job."""
  del compile_mode  # Compile modes only apply to U-SQL.
  configurations = {
      key: properties.Stringize(value)
      for key, value in (configurations or {}).items()}
  job_properties = messages.JobProperties(
      type=messages.JobProperties.TypeValueValuesEnum.Hive,
      script=script,
      configurations=encoding.DictToAdditionalPropertyMessage(
          configurations, messages.JobProperties.ConfigurationsValue,
          sort_items=True))
  if runtime:
    job_properties.runtimeVersion = runtime
  return job_properties


# JobProperties type name -> builder
_BUILDERS = {
    'USql': _BuildUSqlProperties,
    'Hive': _BuildHiveProperties,
}


def _CheckBuilders(type_enum):
  missing = set(type_enum.names()) - set(_BUILDERS)
  if missing:
    raise core_exceptions.InternalError(
        'No JobProperties builder for job types [{0}].'.format(
            ', '.join(sorted(missing))))


_CheckBuilders(analytics.GetMessagesModule().JobProperties.TypeValueValuesEnum)


def BuildJobProperties(messages, job_type, script, runtime=None,
                       compile_mode=None, configurations=None):
  """Builds the JobProperties for a job of the given type.

  Args:
    messages: The API messages module.
    job_type: JobProperties.TypeValueValuesEnum, The type of the job.
    script: str, The script text.
    runtime: str, The runtime version to run the job with, if any.
    compile_mode: str, The U-SQL compile mode name.  Names that do not parse
      are ignored.
    configurations: {str: object}, Hive configurations.  Values are converted
      to strings.

  Raises:
    InvalidJobTypeError: If there is no builder for job_type.

  Returns:
    JobProperties, The properties message.
  """
  builder = _BUILDERS.get(getattr(job_type, 'name', None))
  if builder is None:
    raise exceptions.InvalidJobTypeError(
        job_type, util.EnumNames(messages.JobProperties.TypeValueValuesEnum))
  return builder(messages, script, runtime=runtime, compile_mode=compile_mode,
                 configurations=configurations)
