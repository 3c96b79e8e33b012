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

"""The classes every module under adlsdk.surface implements.

A package's __init__.py defines exactly one Group and every other module
defines exactly one Command.  The first line of the class docstring is the
one line help shown in listings.
"""

import abc


class LayoutException(Exception):
  """A surface module does not define exactly one group or command."""


class _Common(object):
  """Behavior shared by groups and commands.

  Attributes:
    detailed_help: {str: str}, Help sections keyed by section name.  The
      DESCRIPTION section may refer to the class docstring as {description}.
  """
  detailed_help = None

  @staticmethod
  def Args(parser):
    """Registers flags and positionals on the element's parser.

    Args:
      parser: argparse.ArgumentParser, The parser for this group or command.
    """
    pass

  @classmethod
  def ShortHelp(cls):
    doc = (cls.__doc__ or '').strip()
    return doc.splitlines()[0] if doc else ''

  @classmethod
  def LongHelp(cls):
    """Returns the rendered detailed help, or None if there is none."""
    if not cls.detailed_help:
      return None
    sections = []
    for name in ('DESCRIPTION', 'EXAMPLES'):
      text = cls.detailed_help.get(name)
      if text:
        text = text.replace('{description}', cls.ShortHelp())
        sections.append('{0}\n{1}'.format(name, text))
    return '\n\n'.join(sections)

  @staticmethod
  def FromModule(module, is_command):
    """Finds the one group or command class defined by a surface module.

    Classes imported into the module from elsewhere are not considered.

    Args:
      module: module, The imported surface module.
      is_command: bool, Whether the module must hold a Command rather than a
        Group.

    Returns:
      type, The Command or Group subclass.

    Raises:
      LayoutException: If the module defines zero or several such classes, or
        one of the wrong kind.
    """
    found = [
        value for _, value in sorted(vars(module).items())
        if isinstance(value, type) and issubclass(value, _Common) and
        value.__module__ == module.__name__]

    if len(found) != 1:
      raise LayoutException(
          'There must be exactly one command or group in [{0}], found '
          '[{1}].'.format(module.__name__, len(found)))

    element = found[0]
    if is_command and not issubclass(element, Command):
      raise LayoutException(
          'You cannot define groups [{0}] in a command file: [{1}]'.format(
              element.__name__, module.__name__))
    if not is_command and not issubclass(element, Group):
      raise LayoutException(
          'You cannot define commands [{0}] in a command group file: '
          '[{1}]'.format(element.__name__, module.__name__))
    return element


class Group(_Common):
  """A node in the command tree that holds commands and other groups."""

  def Filter(self, context, args):
    """Prepares the shared context before any command below this group runs.

    Filters run from the root group down, once per invocation, on the context
    owned by the CLI object.  Values placed here outlive the invocation.

    Args:
      context: {str:object}, The context handed to the command.
      args: argparse.Namespace, The parsed arguments of the command.
    """
    pass


class Command(_Common, metaclass=abc.ABCMeta):
  """A leaf of the command tree.

  Attributes:
    context: {str:object}, The context prepared by the enclosing groups'
      Filter() methods.
  """

  def __init__(self, context):
    self.context = context

  @abc.abstractmethod
  def Run(self, args):
    """Does the work of the command.

    Args:
      args: argparse.Namespace, The values of the flags registered in Args().

    Returns:
      The resource to print, or None to print nothing.
    """

  def Epilog(self, resources_were_displayed):
    """Called after the resources returned by Run() are displayed.

    Args:
      resources_were_displayed: bool, True if something was printed.
    """
    pass
