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

"""Common utilities for the adl analytics tool."""

import collections
import functools
import os
import uuid

from apitools.base.py import exceptions as apitools_exceptions

from adlsdk.api_lib.datalake_analytics import exceptions
from adlsdk.core import log
from adlsdk.core.util import files


class JobIdSource(object):
  """A FIFO of job IDs handed out one per submission.

  When the queue is empty a fresh random UUID is generated instead.  The
  source is not thread safe.
  """

  def __init__(self, job_ids=None, generator=uuid.uuid4):
    """Creates the source.

    Args:
      job_ids: [str|uuid.UUID], IDs to hand out before generating new ones.
      generator: callable, Produces a new ID when the queue is empty.
    """
    self._queue = collections.deque()
    self._generator = generator
    if job_ids:
      self.Add(*job_ids)

  def __len__(self):
    return len(self._queue)

  def Add(self, *job_ids):
    """Enqueues IDs to be used by upcoming submissions."""
    self._queue.extend(str(job_id) for job_id in job_ids)

  def Next(self):
    """Returns the next queued ID, or a new one if the queue is empty."""
    if self._queue:
      return self._queue.popleft()
    return str(self._generator())


def ValidateScriptSource(script, script_path):
  """Checks that exactly one of script and script_path is given.

  Args:
    script: str, The inline script text.
    script_path: str, The path of a file holding the script.

  Raises:
    AmbiguousInputError: If neither or both are non-empty.
  """
  if bool(script) == bool(script_path):
    raise exceptions.AmbiguousInputError()


def ReadScript(script_path):
  """Reads the script stored at script_path.

  Args:
    script_path: str, A path, possibly starting with ~, absolute or relative
      to the current working directory.

  Raises:
    ScriptNotFoundError: If no file exists at the resolved path.

  Returns:
    str, The full contents of the file.
  """
  path = files.ResolvePath(script_path)
  if not os.path.isfile(path):
    raise exceptions.ScriptNotFoundError(path)
  log.debug('Reading script from [%s].', path)
  return files.GetFileContents(path)


def EnumNames(enum_class):
  """Returns the names of enum_class ordered by their numbers."""
  return [e.name for e in sorted(enum_class, key=lambda e: e.number)]


def _ParseEnum(enum_class, value):
  lowered = value.lower()
  for name in enum_class.names():
    if name.lower() == lowered:
      return enum_class.lookup_by_name(name)
  return None


def ParseJobType(messages, job_type):
  """Converts a job type name into the JobProperties type enum.

  Args:
    messages: The API messages module.
    job_type: str, The job type name, matched case insensitively.

  Raises:
    InvalidJobTypeError: If job_type names no known type.

  Returns:
    JobProperties.TypeValueValuesEnum, The parsed type.
  """
  enum_class = messages.JobProperties.TypeValueValuesEnum
  parsed = _ParseEnum(enum_class, job_type or '')
  if parsed is None:
    raise exceptions.InvalidJobTypeError(job_type, EnumNames(enum_class))
  return parsed


def ParseCompileMode(messages, compile_mode):
  """Converts a compile mode name into its enum, or None if it is unknown.

  Unknown names are not an error; the service default is used instead.

  Args:
    messages: The API messages module.
    compile_mode: str, The compile mode name, matched case insensitively.

  Returns:
    JobProperties.CompileModeValueValuesEnum or None.
  """
  if not compile_mode:
    return None
  parsed = _ParseEnum(messages.JobProperties.CompileModeValueValuesEnum,
                      compile_mode)
  if parsed is None:
    log.debug('Ignoring unrecognized compile mode [%s].', compile_mode)
  return parsed


def HandleHttpError(func):
  """Decorator that converts apitools HttpError into RemoteServiceError."""

  @functools.wraps(func)
  def Wrapper(*args, **kwargs):
    try:
      return func(*args, **kwargs)
    except apitools_exceptions.HttpError as error:
      log.debug('Request failed: %s', error)
      raise exceptions.RemoteServiceError(error) from error

  return Wrapper
