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

"""Base exceptions for the Data Lake Analytics SDK."""


class _Error(Exception):
  """A base exception for all internal errors.

  Library code should not raise this directly; use Error instead.
  """

  def __init__(self, *args, **kwargs):
    super(_Error, self).__init__(*args)
    self.exit_code = kwargs.get('exit_code', 1)


class InternalError(_Error):
  """A base class for all non-recoverable internal errors."""


class Error(_Error):
  """A base exception for all user recoverable errors.

  Any exception that extends this class will not be printed with a stack trace
  when running from the CLI.  The message is printed and the process exits with
  the error's exit_code.
  """


class NetworkIssueError(Error):
  """An error to wrap a general network issue."""

  def __init__(self, message):
    super(NetworkIssueError, self).__init__(
        '{message}\n'
        'This may be due to network connectivity issues. Please check your '
        'network settings, and the status of the service you are trying to '
        'reach.'.format(message=message))
