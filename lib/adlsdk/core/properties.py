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

"""Typed settings for adl.

Each property lives in a section and is resolved, first match wins, from:

  1. a flag given for the current invocation (see SetInvocationValue),
  2. the ADLSDK_<SECTION>_<NAME> environment variable,
  3. the [section] of the INI properties file, which lives in the directory
     named by ADLSDK_CONFIG or in ~/.config/adlsdk,
  4. the property's default.
"""

import configparser
import os

from adlsdk.core import exceptions
from adlsdk.core.util import files


CONFIG_ENV_VAR = 'ADLSDK_CONFIG'
_DEFAULT_CONFIG_DIR = os.path.join('~', '.config', 'adlsdk')
_PROPERTIES_FILE_NAME = 'properties'

_TRUE_STRINGS = ('true', '1', 'on', 'yes', 'y')
_FALSE_STRINGS = ('false', '0', 'off', 'no', 'n', '', 'none')

_SET_ACCOUNT_HELP = """\
To set your default account, add the following to your properties file:

  [datalake_analytics]
  account = ACCOUNT_NAME

or export ADLSDK_DATALAKE_ANALYTICS_ACCOUNT=ACCOUNT_NAME."""


class Error(exceptions.Error):
  """Exceptions for the properties module."""


class PropertiesParseError(Error):
  """The properties file is not valid INI."""


class InvalidValueError(Error):
  """A property was given a value it cannot hold."""


class RequiredPropertyError(Error):
  """A property needed by the command has no value anywhere."""

  def __init__(self, prop, flag=None):
    name = prop.name if prop.section == 'core' else str(prop)
    flag = flag or '--' + prop.name.replace('_', '-')
    msg = ('The required property [{0}] is not currently set.\n'
           'It can be set on a per-command basis by re-running your command '
           'with the [{1}] flag.').format(name, flag)
    if prop.help_on_missing:
      msg += '\n\n' + prop.help_on_missing
    super(RequiredPropertyError, self).__init__(msg)
    self.property = prop


def Stringize(value):
  return value if isinstance(value, str) else str(value)


def ConfigPath():
  """Returns the path of the user properties file."""
  config_dir = os.environ.get(CONFIG_ENV_VAR) or _DEFAULT_CONFIG_DIR
  return os.path.join(files.ExpandHomeDir(config_dir), _PROPERTIES_FILE_NAME)


def _ReadPropertiesFile(path):
  """Returns {section: {name: value}} from the INI file at path, if any."""
  parser = configparser.ConfigParser(interpolation=None)
  try:
    parser.read(path)
  except configparser.Error as e:
    raise PropertiesParseError(str(e))
  return {section: dict(parser.items(section))
          for section in parser.sections()}


def _ValidateBool(prop, value):
  if Stringize(value).lower() not in _TRUE_STRINGS + _FALSE_STRINGS:
    raise InvalidValueError(
        'The [{0}] value [{1}] is not valid. Possible values: [{2}].'.format(
            prop.name, value,
            ', '.join(x or "''" for x in _TRUE_STRINGS + _FALSE_STRINGS)))


class _Property(object):
  """A single named setting.

  Attributes:
    section: str, The name of the owning section.
    name: str, The property name, as written in the properties file.
    default: object, Used when no other source has a value.
    help_on_missing: str, Extra guidance shown when a required value is
      missing.
  """

  def __init__(self, section, name, default=None, validator=None,
               help_on_missing=None):
    self.section = section
    self.name = name
    self.default = default
    self.help_on_missing = help_on_missing
    self._validator = validator

  def __str__(self):
    return '{0}/{1}'.format(self.section, self.name)

  def EnvironmentName(self):
    return 'ADLSDK_{0}_{1}'.format(self.section.upper(), self.name.upper())

  def Validate(self, value):
    """Raises InvalidValueError if value may not be stored in this property."""
    if value is not None and self._validator:
      self._validator(self, value)

  def Get(self, required=False):
    """Gets the value for this property.

    Args:
      required: bool, True to raise RequiredPropertyError when it is unset.

    Returns:
      str, The value, or None if it is not set.
    """
    value = VALUES.Resolve(self, required)
    self.Validate(value)
    return value

  def GetBool(self, required=False):
    """Like Get(), but interprets the value as a boolean."""
    value = VALUES.Resolve(self, required)
    if value is None:
      return None
    return Stringize(value).lower() in _TRUE_STRINGS

  def GetInt(self, required=False):
    """Like Get(), but requires the value to be an integer.

    Args:
      required: bool, True to raise RequiredPropertyError when it is unset.

    Raises:
      InvalidValueError: If the value is not an integer.

    Returns:
      int, The value, or None if it is not set.
    """
    value = self.Get(required=required)
    if value is None:
      return None
    try:
      return int(value)
    except ValueError:
      raise InvalidValueError(
          'The property [{0}] must have an integer value: [{1}]'.format(
              self, value))

  def Set(self, value):
    """Stores the value in this process's environment, or clears it for None.
    """
    self.Validate(value)
    if value is None:
      os.environ.pop(self.EnvironmentName(), None)
    else:
      os.environ[self.EnvironmentName()] = Stringize(value)


class _Section(object):
  """A group of related properties sharing a [section] in the file."""

  def __init__(self, name):
    self.name = name

  def _Add(self, name, **kwargs):
    return _Property(self.name, name, **kwargs)

  def _AddBool(self, name, default=None):
    return self._Add(name, default=default, validator=_ValidateBool)


class _SectionCore(_Section):

  def __init__(self):
    super(_SectionCore, self).__init__('core')
    self.verbosity = self._Add('verbosity')
    self.user_output_enabled = self._AddBool('user_output_enabled',
                                             default=True)
    self.disable_color = self._AddBool('disable_color')
    self.print_unhandled_tracebacks = self._AddBool(
        'print_unhandled_tracebacks')
    # Seconds.
    self.http_timeout = self._Add('http_timeout')


class _SectionAuth(_Section):

  def __init__(self):
    super(_SectionAuth, self).__init__('auth')
    # Sent verbatim as a bearer token, never refreshed.
    self.access_token = self._Add('access_token')


class _SectionDatalakeAnalytics(_Section):

  def __init__(self):
    super(_SectionDatalakeAnalytics, self).__init__('datalake_analytics')
    self.account = self._Add('account', help_on_missing=_SET_ACCOUNT_HELP)
    self.dns_suffix = self._Add('dns_suffix',
                                default='azuredatalakeanalytics.net')
    # A full service URL, used instead of one derived from the account.
    self.endpoint = self._Add('endpoint')


class _Sections(object):
  """All known sections plus the stack of per-invocation flag values."""

  class _ValueFlag(object):

    def __init__(self, value, flag):
      self.value = value
      self.flag = flag

  def __init__(self):
    self.core = _SectionCore()
    self.auth = _SectionAuth()
    self.datalake_analytics = _SectionDatalakeAnalytics()
    self._invocation_values = [{}]

  def PushInvocationValues(self):
    self._invocation_values.append({})

  def PopInvocationValues(self):
    self._invocation_values.pop()

  def SetInvocationValue(self, prop, value, flag):
    """Overrides prop for the current invocation.

    Args:
      prop: _Property, The property the flag maps to.
      value: object, The flag value.  None keeps the other sources active,
        but still records flag so a missing required value names it.
      flag: str, The flag the user can pass to set the property.
    """
    prop.Validate(value)
    self._invocation_values[-1][str(prop)] = self._ValueFlag(value, flag)

  def Resolve(self, prop, required=False):
    """Finds the value of prop from the highest priority source that has one.

    Args:
      prop: _Property, The property to look up.
      required: bool, True to raise instead of returning None.

    Raises:
      RequiredPropertyError: If required and no source has a value.

    Returns:
      object, The value, or None.
    """
    flag = None
    value_flag = self._invocation_values[-1].get(str(prop))
    if value_flag:
      if value_flag.value is not None:
        return value_flag.value
      flag = value_flag.flag

    value = os.environ.get(prop.EnvironmentName())
    if value is not None:
      return value

    value = _ReadPropertiesFile(ConfigPath()).get(prop.section, {}).get(
        prop.name)
    if value is not None:
      return value

    if prop.default is not None:
      return Stringize(prop.default)
    if required:
      raise RequiredPropertyError(prop, flag=flag)
    return None


VALUES = _Sections()
