"""Generated message classes for datalakeanalytics version 2016-03-20-preview.

Creates and manages U-SQL and Hive jobs in an Azure Data Lake Analytics
account.
"""
# NOTE: This file is autogenerated and should not be edited by hand.

from apitools.base.protorpclite import messages as _messages
from apitools.base.py import encoding


package = 'datalakeanalytics'


class DatalakeanalyticsJobsBuildRequest(_messages.Message):
  """A DatalakeanalyticsJobsBuildRequest object.

  Fields:
    apiVersion: Client Api Version.
    jobInformation: A JobInformation resource to be passed as the request
      body.
  """

  apiVersion = _messages.StringField(1)
  jobInformation = _messages.MessageField('JobInformation', 2)


class DatalakeanalyticsJobsCreateRequest(_messages.Message):
  """A DatalakeanalyticsJobsCreateRequest object.

  Fields:
    apiVersion: Client Api Version.
    jobIdentity: The job ID (a GUID) for the job being submitted.
    jobInformation: A JobInformation resource to be passed as the request
      body.
  """

  apiVersion = _messages.StringField(1)
  jobIdentity = _messages.StringField(2, required=True)
  jobInformation = _messages.MessageField('JobInformation', 3)


class JobErrorDetails(_messages.Message):
  """The Data Lake Analytics job error details.

  Enums:
    SeverityValueValuesEnum: The severity level of the failure.

  Fields:
    description: The error message description.
    details: The details of the error message.
    endOffset: The end offset in the job where the error was found.
    errorId: The specific identifier for the type of error encountered in the
      job.
    filePath: The path to any supplemental error files, if any.
    helpLink: The link to MSDN or Azure help for this type of error, if any.
    lineNumber: The specific line number in the job where the error occured.
    message: The user friendly error message for the failure.
    resolution: The recommended resolution for the failure, if any.
    severity: The severity level of the failure.
    source: The ultimate source of the failure (usually either SYSTEM or USER).
    startOffset: The start offset in the job where the error was found
  """

  class SeverityValueValuesEnum(_messages.Enum):
    """The severity level of the failure.

    Values:
      Warning: <no description>
      Error: <no description>
    """
    Warning = 0
    Error = 1

  description = _messages.StringField(1)
  details = _messages.StringField(2)
  endOffset = _messages.IntegerField(3, variant=_messages.Variant.INT32)
  errorId = _messages.StringField(4)
  filePath = _messages.StringField(5)
  helpLink = _messages.StringField(6)
  lineNumber = _messages.IntegerField(7, variant=_messages.Variant.INT32)
  message = _messages.StringField(8)
  resolution = _messages.StringField(9)
  severity = _messages.EnumField('SeverityValueValuesEnum', 10)
  source = _messages.StringField(11)
  startOffset = _messages.IntegerField(12, variant=_messages.Variant.INT32)


class JobInformation(_messages.Message):
  """The common Data Lake Analytics job information properties.

  Enums:
    ResultValueValuesEnum: The result of job execution or the current result
      of the running job.
    StateValueValuesEnum: The job state. When the job is in the Ended state,
      refer to Result and ErrorMessage for details.
    TypeValueValuesEnum: The job type of the current job (Hive or USql).

  Fields:
    degreeOfParallelism: The degree of parallelism used for this job. This
      must be greater than 0.
    endTime: The completion time of the job.
    errorMessage: The error message details for the job, if the job failed.
    jobId: The job's unique identifier (a GUID).
    name: The friendly name of the job.
    priority: The priority value for the current job. Lower numbers have a
      higher priority. By default, a job has a priority of 1000. This must be
      greater than 0.
    properties: The job specific properties.
    result: The result of job execution or the current result of the running
      job.
    startTime: The start time of the job.
    state: The job state. When the job is in the Ended state, refer to Result
      and ErrorMessage for details.
    submitTime: The time the job was submitted to the service.
    submitter: The user or account that submitted the job.
    type: The job type of the current job (Hive or USql).
  """

  class ResultValueValuesEnum(_messages.Enum):
    """The result of job execution or the current result of the running job.

    Values:
      None: <no description>
      Succeeded: <no description>
      Cancelled: <no description>
      Failed: <no description>
    """
    None_ = 0
    Succeeded = 1
    Cancelled = 2
    Failed = 3

  class StateValueValuesEnum(_messages.Enum):
    """The job state. When the job is in the Ended state, refer to Result and
    ErrorMessage for details.

    Values:
      Accepted: <no description>
      Compiling: <no description>
      Ended: <no description>
      New: <no description>
      Queued: <no description>
      Running: <no description>
      Scheduling: <no description>
      Starting: <no description>
      Paused: <no description>
      WaitingForCapacity: <no description>
    """
    Accepted = 0
    Compiling = 1
    Ended = 2
    New = 3
    Queued = 4
    Running = 5
    Scheduling = 6
    Starting = 7
    Paused = 8
    WaitingForCapacity = 9

  class TypeValueValuesEnum(_messages.Enum):
    """The job type of the current job (Hive or USql).

    Values:
      USql: <no description>
      Hive: <no description>
    """
    USql = 0
    Hive = 1

  degreeOfParallelism = _messages.IntegerField(1, variant=_messages.Variant.INT32)
  endTime = _messages.StringField(2)
  errorMessage = _messages.MessageField('JobErrorDetails', 3, repeated=True)
  jobId = _messages.StringField(4)
  name = _messages.StringField(5)
  priority = _messages.IntegerField(6, variant=_messages.Variant.INT32)
  properties = _messages.MessageField('JobProperties', 7)
  result = _messages.EnumField('ResultValueValuesEnum', 8)
  startTime = _messages.StringField(9)
  state = _messages.EnumField('StateValueValuesEnum', 10)
  submitTime = _messages.StringField(11)
  submitter = _messages.StringField(12)
  type = _messages.EnumField('TypeValueValuesEnum', 13)


class JobProperties(_messages.Message):
  """The common Data Lake Analytics job properties. The `type` field selects
  which of the remaining fields apply: U-SQL jobs use compileMode, Hive jobs
  use configurations.

  Enums:
    CompileModeValueValuesEnum: The compile mode of a U-SQL job.
    TypeValueValuesEnum: The job type of the current job (Hive or USql).

  Messages:
    ConfigurationsValue: The custom configurations of a Hive job.

  Fields:
    compileMode: The compile mode of a U-SQL job.
    configurations: The custom configurations of a Hive job.
    runtimeVersion: The runtime version of the Data Lake Analytics engine to
      use for the specific type of job being run.
    script: The script to run.
    type: The job type of the current job (Hive or USql).
  """

  class CompileModeValueValuesEnum(_messages.Enum):
    """The compile mode of a U-SQL job.

    Values:
      Semantic: <no description>
      Full: <no description>
      SingleBox: <no description>
    """
    Semantic = 0
    Full = 1
    SingleBox = 2

  class TypeValueValuesEnum(_messages.Enum):
    """The job type of the current job (Hive or USql).

    Values:
      USql: <no description>
      Hive: <no description>
    """
    USql = 0
    Hive = 1

  @encoding.MapUnrecognizedFields('additionalProperties')
  class ConfigurationsValue(_messages.Message):
    """The custom configurations of a Hive job.

    Messages:
      AdditionalProperty: An additional property for a ConfigurationsValue
        object.

    Fields:
      additionalProperties: Additional properties of type ConfigurationsValue
    """

    class AdditionalProperty(_messages.Message):
      """An additional property for a ConfigurationsValue object.

      Fields:
        key: Name of the additional property.
        value: A string attribute.
      """

      key = _messages.StringField(1)
      value = _messages.StringField(2)

    additionalProperties = _messages.MessageField('AdditionalProperty', 1, repeated=True)

  compileMode = _messages.EnumField('CompileModeValueValuesEnum', 1)
  configurations = _messages.MessageField('ConfigurationsValue', 2)
  runtimeVersion = _messages.StringField(3)
  script = _messages.StringField(4)
  type = _messages.EnumField('TypeValueValuesEnum', 5)


class StandardQueryParameters(_messages.Message):
  """Query parameters accepted by all methods.

  Fields:
    timeout: The maximum number of seconds the service spends processing the
      request.
  """

  timeout = _messages.IntegerField(1, variant=_messages.Variant.INT32)


encoding.AddCustomJsonEnumMapping(
    JobInformation.ResultValueValuesEnum, 'None_', 'None')
encoding.AddCustomJsonFieldMapping(
    DatalakeanalyticsJobsBuildRequest, 'apiVersion', 'api-version')
encoding.AddCustomJsonFieldMapping(
    DatalakeanalyticsJobsCreateRequest, 'apiVersion', 'api-version')
