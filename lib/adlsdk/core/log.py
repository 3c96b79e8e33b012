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

"""Console output and logging for adl.

Three channels reach the terminal:

  out: command results, written to stdout.
  status: progress and confirmation lines such as "Job [ID] submitted.",
    written to stderr.
  the logging module: diagnostics formatted as "LEVEL: message" on stderr and
    filtered by the active verbosity.

The out and status writers can be silenced with --no-user-output-enabled.
Diagnostics are only governed by --verbosity.
"""

import logging
import os
import sys

from adlsdk.core import properties

DEFAULT_VERBOSITY = logging.WARNING
DEFAULT_VERBOSITY_STRING = 'warning'
DEFAULT_USER_OUTPUT_ENABLED = True

_VERBOSITY_LEVELS = [
    ('debug', logging.DEBUG),
    ('info', logging.INFO),
    ('warning', logging.WARNING),
    ('error', logging.ERROR),
    ('critical', logging.CRITICAL),
    ('none', logging.CRITICAL + 10)]
VALID_VERBOSITY_STRINGS = dict(_VERBOSITY_LEVELS)


class _ConsoleWriter(object):
  """A minimal file-like object for user facing output.

  Writes only reach the underlying stream while user output is enabled on the
  owning manager.
  """

  def __init__(self, manager, stream_name):
    self._manager = manager
    self._stream_name = stream_name

  @property
  def stream(self):
    """The stream currently backing this writer."""
    return getattr(self._manager, self._stream_name)

  def Print(self, *msg):
    """Writes the space separated messages followed by a newline."""
    self.write(' '.join(str(x) for x in msg) + '\n')

  # pylint: disable=g-bad-name, This must match file-like objects
  def write(self, msg):
    if self._manager.user_output_enabled:
      self.stream.write(msg)

  # pylint: disable=g-bad-name, This must match file-like objects
  def flush(self):
    if self._manager.user_output_enabled:
      self.stream.flush()

  def isatty(self):
    isatty = getattr(self.stream, 'isatty', None)
    return bool(isatty and isatty())


class _ConsoleFormatter(logging.Formatter):
  """Renders records as "LEVEL: message", in color on capable terminals."""

  _PLAIN = '%(levelname)s: %(message)s'
  _COLORS = {
      logging.WARNING: '\033[1;33m',
      logging.ERROR: '\033[1;31m',
      logging.CRITICAL: '\033[1;31m',
  }
  _END = '\033[0m'

  def __init__(self, stream, use_color=None):
    super(_ConsoleFormatter, self).__init__(self._PLAIN)
    if use_color is not None:
      self._use_color = use_color
      return
    self._use_color = (
        not properties.VALUES.core.disable_color.GetBool() and
        bool(getattr(stream, 'isatty', lambda: False)()) and
        os.name != 'nt')

  def format(self, record):
    message = super(_ConsoleFormatter, self).format(record)
    color = self._use_color and self._COLORS.get(record.levelno)
    if not color:
      return message
    level, _, rest = message.partition(':')
    return '{0}{1}:{2}{3}'.format(color, level, self._END, rest)


class _LogManager(object):
  """Owns the stderr log handler and the console writers."""

  def __init__(self):
    self._root_logger = logging.getLogger()
    self._root_logger.setLevel(logging.NOTSET)

    self.stdout = None
    self.stderr = None
    self.out = _ConsoleWriter(self, 'stdout')
    self.err = _ConsoleWriter(self, 'stderr')

    self.verbosity = None
    self.user_output_enabled = DEFAULT_USER_OUTPUT_ENABLED
    self._handler = None
    self.Reset(sys.stdout, sys.stderr)

  def Reset(self, stdout, stderr):
    """Points all output at the given streams and reloads the settings."""
    self.stdout = stdout
    self.stderr = stderr

    self._root_logger.handlers[:] = []
    self._handler = logging.StreamHandler(stderr)
    self._root_logger.addHandler(self._handler)

    self.verbosity = None
    try:
      self._handler.setFormatter(_ConsoleFormatter(stderr))
      self.SetVerbosity(None)
      self.SetUserOutputEnabled(None)
    except properties.Error:
      # A broken properties file is reported by the first command that reads
      # a property, not at import.
      self._handler.setFormatter(_ConsoleFormatter(stderr, use_color=False))
      self.SetVerbosity(DEFAULT_VERBOSITY)
      self.SetUserOutputEnabled(DEFAULT_USER_OUTPUT_ENABLED)

  def SetVerbosity(self, verbosity):
    if verbosity is None:
      name = properties.VALUES.core.verbosity.Get()
      if name is not None:
        verbosity = VALID_VERBOSITY_STRINGS.get(name.lower())
    if verbosity is None:
      verbosity = DEFAULT_VERBOSITY

    old_verbosity = self.verbosity
    self.verbosity = verbosity
    self._handler.setLevel(verbosity)
    return old_verbosity

  def SetUserOutputEnabled(self, enabled):
    if enabled is None:
      enabled = properties.VALUES.core.user_output_enabled.GetBool()
    if enabled is None:
      enabled = DEFAULT_USER_OUTPUT_ENABLED

    old_enabled = self.user_output_enabled
    self.user_output_enabled = enabled
    return old_enabled


_log_manager = _LogManager()

# Command results.
out = _log_manager.out

# User facing messages on stderr.
err = _log_manager.err

# Progress and confirmation lines for someone watching the command run.
status = err


def Print(*msg):
  """Writes the given messages to stdout, followed by a newline."""
  out.Print(*msg)


def Reset(stdout=None, stderr=None):
  """Reinitializes logging against the given streams.

  Args:
    stdout: The stream for results.  Defaults to sys.stdout.
    stderr: The stream for status and diagnostics.  Defaults to sys.stderr.
  """
  _log_manager.Reset(stdout or sys.stdout, stderr or sys.stderr)


def SetVerbosity(verbosity):
  """Sets the lowest level of diagnostics shown on the console.

  Args:
    verbosity: int, A logging level.  None means the core/verbosity property,
      or warning if that is unset.

  Returns:
    int, The previous verbosity.
  """
  return _log_manager.SetVerbosity(verbosity)


def GetVerbosity():
  return _log_manager.verbosity


def GetVerbosityName(verbosity=None):
  """Returns the name of verbosity, or of the current one, or None."""
  if verbosity is None:
    verbosity = GetVerbosity()
  for name, level in _VERBOSITY_LEVELS:
    if level == verbosity:
      return name
  return None


def OrderedVerbosityNames():
  """Returns the verbosity names from most to least verbose."""
  return [name for name, _ in _VERBOSITY_LEVELS]


def SetUserOutputEnabled(enabled):
  """Turns the out and status writers on or off.

  Args:
    enabled: bool, None means the core/user_output_enabled property, or True
      if that is unset.

  Returns:
    bool, The previous setting.
  """
  return _log_manager.SetUserOutputEnabled(enabled)


def IsUserOutputEnabled():
  return _log_manager.user_output_enabled


# pylint: disable=invalid-name
debug = logging.debug
info = logging.info
warning = logging.warning
error = logging.error
