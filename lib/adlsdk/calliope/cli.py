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

"""Builds an argparse command tree from a package of groups and commands."""

import argparse
import importlib
import pkgutil
import sys

from adlsdk.calliope import base
from adlsdk.calliope import display
from adlsdk.calliope import exceptions
from adlsdk.core import log
from adlsdk.core import properties


class _CommandInfo(object):
  """Everything needed to run a leaf command once its args are parsed.

  Attributes:
    command_class: type, The base.Command subclass to run.
    group_classes: [type], The base.Group subclasses from the root down to the
      command's parent, in that order.
    path: [str], The command path, starting with the CLI name.
  """

  def __init__(self, command_class, group_classes, path):
    self.command_class = command_class
    self.group_classes = group_classes
    self.path = path


class CLILoader(object):
  """Walks a surface package and produces a CLI for it."""

  def __init__(self, name, command_root_package, context=None):
    """Creates the loader.

    Args:
      name: str, The program name, also the first element of command paths in
        error messages.
      command_root_package: str, The dotted name of the package that holds the
        top level group.  Subpackages are groups, other modules are commands.
      context: {str:object}, Initial context handed to every group's Filter()
        and command.  It lives as long as the generated CLI.
    """
    self.__name = name
    self.__command_root_package = command_root_package
    self.__context = context if context is not None else {}

  def Generate(self):
    """Imports the whole surface and builds its parser.

    Returns:
      CLI, The runnable command line tool.
    """
    root_module = importlib.import_module(self.__command_root_package)
    top_group = base._Common.FromModule(root_module, is_command=False)  # pylint: disable=protected-access
    parser = argparse.ArgumentParser(
        prog=self.__name,
        description=top_group.LongHelp() or top_group.ShortHelp(),
        formatter_class=argparse.RawDescriptionHelpFormatter)
    top_group.Args(parser)
    self.__LoadGroup(root_module, parser, [top_group], [self.__name])
    return CLI(self.__name, parser, self.__context)

  def __LoadGroup(self, package, parser, group_classes, path):
    """Adds the commands and sub groups of package to parser."""
    subparsers = parser.add_subparsers(metavar='GROUP | COMMAND')
    subparsers.required = True
    for _, module_name, is_pkg in sorted(
        pkgutil.iter_modules(package.__path__), key=lambda m: m[1]):
      if module_name.startswith('_') or module_name.endswith('_test'):
        continue
      module = importlib.import_module(
          '{0}.{1}'.format(package.__name__, module_name))
      element = base._Common.FromModule(module, is_command=not is_pkg)  # pylint: disable=protected-access
      sub_parser = subparsers.add_parser(
          module_name,
          help=element.ShortHelp(),
          description=element.LongHelp() or element.ShortHelp(),
          formatter_class=argparse.RawDescriptionHelpFormatter)
      sub_path = path + [module_name]
      element.Args(sub_parser)
      if is_pkg:
        self.__LoadGroup(module, sub_parser, group_classes + [element],
                         sub_path)
      else:
        self.__AddBuiltinGlobalFlags(sub_parser)
        sub_parser.set_defaults(
            calliope_command=_CommandInfo(element, group_classes, sub_path))

  def __AddBuiltinGlobalFlags(self, parser):
    """Adds the flags every command accepts."""
    verbosities = log.OrderedVerbosityNames()
    parser.add_argument(
        '--verbosity',
        choices=verbosities,
        default=None,
        help=('Override the default verbosity for this command. This must be '
              'a standard logging verbosity level: [{values}] (Default: '
              '[{default}]).').format(
                  values=', '.join(verbosities),
                  default=log.DEFAULT_VERBOSITY_STRING))
    parser.add_argument(
        '--user-output-enabled',
        action=argparse.BooleanOptionalAction,
        default=None,
        help='Print command results and status messages.')
    parser.add_argument(
        '--format',
        choices=display.SupportedFormats(),
        default=None,
        help='Format for printing command output resources. (Default: '
        '[{0}]).'.format(display.DEFAULT_FORMAT))


class CLI(object):
  """A command line tool produced by CLILoader.Generate()."""

  def __init__(self, name, parser, context):
    self.__name = name
    self.__parser = parser
    self.__context = context

  @property
  def name(self):
    return self.__name

  @property
  def context(self):
    return self.__context

  def Execute(self, args=None):
    """Parses args and runs the command they select.

    Flag values that map to properties only apply for this call.

    Args:
      args: [str], The command line without the program name.  sys.argv is
        used when None.

    Raises:
      ValueError: If args is a single string.
      SystemExit: On usage errors, and with the error's exit code when the
        command fails with a known error.

    Returns:
      The resource returned by the command's Run().
    """
    if isinstance(args, str):
      raise ValueError('Execute expects an iterable of strings, not a string.')
    if args is None:
      args = sys.argv[1:]

    # Errors raised while parsing are reported against the bare program name.
    command_path_string = self.__name
    restore = []
    properties.VALUES.PushInvocationValues()
    try:
      args = self.__parser.parse_args(args)
      command_info = args.calliope_command
      command_path_string = '.'.join(command_info.path)
      self._ApplyGlobalFlags(args, restore)

      for group_class in command_info.group_classes:
        group_class().Filter(self.__context, args)
      command = command_info.command_class(context=self.__context)
      resources = command.Run(args)
      display.Displayer(command, args, resources).Display()
      return resources

    except Exception as exc:  # pylint: disable=broad-except
      self._HandleAllErrors(exc, command_path_string)

    finally:
      properties.VALUES.PopInvocationValues()
      for undo in reversed(restore):
        undo()

  def _ApplyGlobalFlags(self, args, restore):
    """Pushes --verbosity and --user-output-enabled into properties and log.

    Args:
      args: argparse.Namespace, The parsed command line.
      restore: [callable], Receives the calls that put log settings back once
        the invocation is over.
    """
    properties.VALUES.SetInvocationValue(
        properties.VALUES.core.verbosity, args.verbosity, '--verbosity')
    if args.user_output_enabled is not None:
      properties.VALUES.SetInvocationValue(
          properties.VALUES.core.user_output_enabled,
          args.user_output_enabled, '--user-output-enabled')

    old_enabled = log.SetUserOutputEnabled(None)
    restore.append(lambda: log.SetUserOutputEnabled(old_enabled))
    old_verbosity = log.SetVerbosity(None)
    restore.append(lambda: log.SetVerbosity(old_verbosity))

  def _HandleAllErrors(self, exc, command_path_string):
    """Reports known errors and exits, re-raising anything else.

    Args:
      exc: Exception, The exception that was raised.
      command_path_string: str, The '.' separated command path.

    Raises:
      exc, if it is not a known error.
    """
    known_exc = exceptions.ConvertKnownError(exc)
    if known_exc:
      msg = '({0}) {1}'.format(command_path_string, known_exc)
      log.debug(msg, exc_info=sys.exc_info())
      log.error(msg)
      self._Exit(known_exc)
    else:
      log.debug(str(exc), exc_info=sys.exc_info())
      raise exc

  def _Exit(self, exc):
    sys.exit(getattr(exc, 'exit_code', 1))
