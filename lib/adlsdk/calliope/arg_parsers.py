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

"""argparse types and actions shared by adl commands.

Example usage:

  parser.add_argument(
      '--priority', type=arg_parsers.BoundedInt(lower_bound=1))
  parser.add_argument(
      '--configurations',
      type=arg_parsers.ArgDict(),
      action=arg_parsers.UpdateAction)

  args = parser.parse_args(
      ['--priority', '10', '--configurations', 'a=1,b=2',
       '--configurations', 'c=3'])

  assert args.priority == 10
  assert args.configurations == {'a': '1', 'b': '2', 'c': '3'}
"""

import argparse

from adlsdk.core import exceptions


class Error(exceptions.Error):
  """Exceptions that are defined by this module."""


class ArgumentTypeError(Error, argparse.ArgumentTypeError):
  """Raised by the type= callables below; argparse reports it as usage."""


def _Received(error, user_input):
  if not user_input:
    return error + '; received empty string'
  return '{0}; received: {1}'.format(error, user_input)


def BoundedInt(lower_bound=None, upper_bound=None):
  """Returns a type= callable parsing an int in [lower_bound, upper_bound].

  Args:
    lower_bound: int, The smallest accepted value, or None for no limit.
    upper_bound: int, The largest accepted value, or None for no limit.

  Returns:
    (str)->int, The parser.
  """

  def Parse(value):
    try:
      number = int(value)
    except ValueError:
      raise ArgumentTypeError(_Received('Value must be an integer', value))
    if lower_bound is not None and number < lower_bound:
      raise ArgumentTypeError(_Received(
          'Value must be greater than or equal to {0}'.format(lower_bound),
          value))
    if upper_bound is not None and number > upper_bound:
      raise ArgumentTypeError(_Received(
          'Value must be less than or equal to {0}'.format(upper_bound),
          value))
    return number

  return Parse


def NonEmptyString():
  """Returns a type= callable that rejects the empty string."""

  def Parse(value):
    if not value:
      raise ArgumentTypeError('Value must not be empty')
    return value

  return Parse


class ArgDict(object):
  """Interprets a flag value of the form KEY=VALUE[,KEY=VALUE...] as a dict.

  Only the first '=' of an item separates key from value, so values may
  themselves contain '='.  Later duplicates of a key win.
  """

  def __init__(self, value_type=None):
    """Initialize an ArgDict.

    Args:
      value_type: (str)->object, Applied to every value.  Values stay strings
        when None.
    """
    self.value_type = value_type

  def __call__(self, arg_value):  # pylint:disable=missing-docstring
    items = {}
    for item in arg_value.split(','):
      if not item:
        continue
      key, sep, value = item.partition('=')
      if not sep:
        raise ArgumentTypeError(
            'Bad syntax for dict arg: {0!r}. Use KEY=VALUE pairs separated by '
            'commas.'.format(item))
      if not key:
        raise ArgumentTypeError('bad key for dict arg: {0!r}'.format(item))
      items[key] = self.value_type(value) if self.value_type else value
    return items


class UpdateAction(argparse.Action):
  """Merges the dicts from repeated occurrences of a flag.

  With --configurations declared as ArgDict() plus this action,

    --configurations k1=v1,k2=v2

  and

    --configurations k1=v1 --configurations k2=v2

  both produce {'k1': 'v1', 'k2': 'v2'}.  When a key repeats the last value
  given wins.  The destination stays None if the flag is never passed.
  """

  def __call__(self, parser, namespace, values, option_string=None):
    merged = dict(getattr(namespace, self.dest, None) or {})
    merged.update(values)
    setattr(namespace, self.dest, merged)
