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

"""Errors that commands report to the user instead of crashing.

CLI.Execute() prints any core_exceptions.Error, or any error listed in
_KNOWN_ERRORS, as a single "ERROR: (command.path) message" line and exits
with its exit code.  Everything else propagates to adl_main as a crash.
"""

import ssl

import httplib2

from adlsdk.core import exceptions as core_exceptions


class ToolException(core_exceptions.Error):
  """ToolException is for Run methods to throw for non-code-bug errors."""


# Errors raised below the SDK that still deserve a friendly message instead of
# a crash report, mapped to the class they are converted to.
_KNOWN_ERRORS = {
    httplib2.ServerNotFoundError: core_exceptions.NetworkIssueError,
    ssl.SSLError: core_exceptions.NetworkIssueError,
    ConnectionError: core_exceptions.NetworkIssueError,
}


def ConvertKnownError(exc):
  """Returns the error to report for exc, or None if it is a crash.

  Args:
    exc: Exception, The exception raised by the command.

  Returns:
    exc itself for core errors, a NetworkIssueError for transport failures,
    otherwise None.
  """
  if isinstance(exc, core_exceptions.Error):
    return exc
  for error_type, alt_exc_class in _KNOWN_ERRORS.items():
    if isinstance(exc, error_type):
      return alt_exc_class(str(exc))
  return None
