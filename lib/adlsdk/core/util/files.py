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

"""Path and file helpers."""

import os

from adlsdk.core import exceptions


class Error(exceptions.Error):
  """A file could not be read."""


def ExpandHomeDir(path):
  """Returns path with leading ~<SEP> or ~<USER><SEP> expanded."""
  return os.path.expanduser(path)


def ResolvePath(path):
  """Returns the absolute path of path relative to the working directory.

  Args:
    path: str, A possibly relative path, optionally starting with ~.

  Returns:
    str, The normalized absolute path. The file need not exist.
  """
  return os.path.abspath(ExpandHomeDir(path))


def GetFileContents(path):
  """Reads a UTF-8 text file verbatim, minus any leading byte order mark.

  Args:
    path: str, The file to read.

  Raises:
    Error: If the file cannot be opened or decoded.

  Returns:
    str, The file contents.
  """
  try:
    with open(path, encoding='utf-8-sig', newline='') as f:
      return f.read()
  except (OSError, UnicodeDecodeError) as e:
    raise Error('Unable to read file [{0}]: {1}'.format(path, e))
