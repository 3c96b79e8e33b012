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

"""Exceptions raised while submitting Data Lake Analytics jobs."""

from adlsdk.core import exceptions


class Error(exceptions.Error):
  """Base class for Data Lake Analytics job errors."""


class AmbiguousInputError(Error):
  """Neither or both of the inline script and the script path were given."""

  def __init__(self):
    super(AmbiguousInputError, self).__init__(
        'Exactly one of [--script] or [--script-path] must be specified.')


class ScriptNotFoundError(Error):
  """The script file to submit does not exist."""

  def __init__(self, path):
    super(ScriptNotFoundError, self).__init__(
        'Could not find script file [{0}].'.format(path))
    self.path = path


class InvalidJobTypeError(Error):
  """The job type is not one the service knows how to run."""

  def __init__(self, job_type, valid_types):
    super(InvalidJobTypeError, self).__init__(
        'Invalid job type [{0}]. Must be one of [{1}].'.format(
            job_type, ', '.join(valid_types)))
    self.job_type = job_type


class UnsupportedOperationError(Error):
  """The requested operation is not available for the job type."""


class RemoteServiceError(Error):
  """The job service rejected a request.

  Attributes:
    error: apitools_exceptions.HttpError, The original transport error.
  """

  def __init__(self, error):
    status = error.status_code
    content = error.content
    if isinstance(content, bytes):
      content = content.decode('utf-8', 'replace')
    super(RemoteServiceError, self).__init__(
        'HTTPError {0}: {1}'.format(status, content))
    self.error = error
    self.status_code = status
