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

"""Base classes for all adlsdk tests."""

import io
import os
import shutil
import tempfile
import unittest

import mock

from adlsdk.core import log
from adlsdk.core import properties


main = unittest.main


class Base(unittest.TestCase):
  """Base class for all tests.

  Subclasses override SetUp and TearDown rather than setUp and tearDown.
  Every test runs with a clean ADLSDK_ environment, a private properties file
  location and captured console output.
  """

  def setUp(self):
    environ = dict((k, v) for k, v in os.environ.items()
                   if not k.startswith('ADLSDK_'))
    self._env_patch = mock.patch.dict(os.environ, environ, clear=True)
    self._env_patch.start()
    self.addCleanup(self._env_patch.stop)

    self.temp_path = tempfile.mkdtemp()
    self.addCleanup(shutil.rmtree, self.temp_path, ignore_errors=True)
    self.config_path = os.path.join(self.temp_path, 'config')
    os.makedirs(self.config_path)
    os.environ[properties.CONFIG_ENV_VAR] = self.config_path

    self.stdout = io.StringIO()
    self.stderr = io.StringIO()
    log.Reset(self.stdout, self.stderr)
    self.addCleanup(log.Reset)

    self.SetUp()

  def tearDown(self):
    self.TearDown()

  def SetUp(self):
    pass

  def TearDown(self):
    pass

  def Touch(self, directory, name, contents=''):
    """Creates a file named name in directory holding contents."""
    path = os.path.join(directory, name)
    with open(path, 'w') as f:
      f.write(contents)
    return path

  def WriteProperties(self, contents):
    """Writes contents as the user properties file."""
    return self.Touch(self.config_path, 'properties', contents)

  def GetOutput(self):
    return self.stdout.getvalue()

  def GetErr(self):
    return self.stderr.getvalue()

  def AssertOutputEquals(self, expected):
    self.assertEqual(expected, self.GetOutput())

  def AssertOutputContains(self, expected):
    self.assertIn(expected, self.GetOutput())

  def AssertErrEquals(self, expected):
    self.assertEqual(expected, self.GetErr())

  def AssertErrContains(self, expected):
    self.assertIn(expected, self.GetErr())

  def AssertErrNotContains(self, unexpected):
    self.assertNotIn(unexpected, self.GetErr())
