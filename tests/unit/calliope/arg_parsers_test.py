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

"""Tests for adlsdk.calliope.arg_parsers."""

import argparse

from adlsdk.calliope import arg_parsers
from tests.lib import test_case


class BoundedIntTest(test_case.Base):

  def testWithinBounds(self):
    parse = arg_parsers.BoundedInt(lower_bound=1, upper_bound=10)
    self.assertEqual(1, parse('1'))
    self.assertEqual(10, parse('10'))

  def testBelowLowerBound(self):
    with self.assertRaisesRegex(
        arg_parsers.ArgumentTypeError,
        r'Value must be greater than or equal to 1; received: 0'):
      arg_parsers.BoundedInt(lower_bound=1)('0')

  def testAboveUpperBound(self):
    with self.assertRaisesRegex(
        arg_parsers.ArgumentTypeError,
        r'Value must be less than or equal to 5; received: 6'):
      arg_parsers.BoundedInt(upper_bound=5)('6')

  def testEmptyString(self):
    with self.assertRaisesRegex(arg_parsers.ArgumentTypeError,
                                'received empty string'):
      arg_parsers.BoundedInt()('')

  def testNotAnInteger(self):
    with self.assertRaisesRegex(arg_parsers.ArgumentTypeError,
                                r'Value must be an integer; received: two'):
      arg_parsers.BoundedInt()('two')

  def testIsArgparseError(self):
    self.assertTrue(issubclass(arg_parsers.ArgumentTypeError,
                               argparse.ArgumentTypeError))


class NonEmptyStringTest(test_case.Base):

  def testAccepts(self):
    self.assertEqual('myjob', arg_parsers.NonEmptyString()('myjob'))

  def testRejectsEmpty(self):
    with self.assertRaisesRegex(arg_parsers.ArgumentTypeError,
                                'Value must not be empty'):
      arg_parsers.NonEmptyString()('')


class ArgDictTest(test_case.Base):

  def testParse(self):
    self.assertEqual({'a': '1', 'b': 'x=y'},
                     arg_parsers.ArgDict()('a=1,b=x=y'))

  def testEmpty(self):
    self.assertEqual({}, arg_parsers.ArgDict()(''))
    self.assertEqual({'a': '1'}, arg_parsers.ArgDict()('a=1,'))

  def testLastDuplicateWins(self):
    self.assertEqual({'a': '2'}, arg_parsers.ArgDict()('a=1,a=2'))

  def testValueType(self):
    self.assertEqual({'a': 1, 'b': 2},
                     arg_parsers.ArgDict(value_type=int)('a=1,b=2'))

  def testBadSyntax(self):
    with self.assertRaisesRegex(arg_parsers.ArgumentTypeError,
                                'Bad syntax for dict arg'):
      arg_parsers.ArgDict()('a')

  def testEmptyKey(self):
    with self.assertRaisesRegex(arg_parsers.ArgumentTypeError,
                                'bad key for dict arg'):
      arg_parsers.ArgDict()('=1')


class UpdateActionTest(test_case.Base):

  def SetUp(self):
    self.parser = argparse.ArgumentParser()
    self.parser.add_argument(
        '--configurations',
        type=arg_parsers.ArgDict(),
        action=arg_parsers.UpdateAction)

  def testRepeatedFlagsMerge(self):
    args = self.parser.parse_args(
        ['--configurations', 'a=1,b=2', '--configurations', 'b=3,c=4'])
    self.assertEqual({'a': '1', 'b': '3', 'c': '4'}, args.configurations)

  def testUnset(self):
    self.assertIsNone(self.parser.parse_args([]).configurations)


if __name__ == '__main__':
  test_case.main()
