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

"""Resource display for all calliope commands.

The print order is:

  * Display the resource in the --format printer (yaml unless overridden).
  * Command.Epilog()
"""

import json

from apitools.base.protorpclite import messages
from apitools.base.py import encoding

from adlsdk.core import exceptions
from adlsdk.core import log
from adlsdk.core import yaml

DEFAULT_FORMAT = 'yaml'


class UnknownFormatError(exceptions.Error):
  """Unknown format name exception."""


def _PrintJson(resource, out):
  out.write(json.dumps(resource, indent=2, sort_keys=True) + '\n')


def _PrintYaml(resource, out):
  out.write(yaml.dump(resource))


_PRINTERS = {
    'json': _PrintJson,
    'yaml': _PrintYaml,
}


def SupportedFormats():
  return sorted(_PRINTERS)


def MakeSerializable(resource):
  """Returns resource converted to builtin types a printer can consume."""
  if isinstance(resource, messages.Message):
    return encoding.MessageToPyValue(resource)
  if isinstance(resource, (list, tuple)):
    return [MakeSerializable(r) for r in resource]
  return resource


class Displayer(object):
  """Implements the resource display method."""

  def __init__(self, command, args, resources=None, out=None):
    """Constructor.

    Args:
      command: fun(args), The Command object containing the Run() method that
        produced resources.
      args: argparse.Namespace, The parsed command line arguments.
      resources: resource, The resource to display, returned by command.Run().
      out: file-like object, The output stream.  log.out if None.
    """
    self._command = command
    self._args = args
    self._resources = resources
    self._format = getattr(args, 'format', None) or DEFAULT_FORMAT
    self._out = out or log.out

  def Display(self):
    """The default display method.

    Returns:
      The resources that were displayed.

    Raises:
      UnknownFormatError: If the requested format has no printer.
    """
    if self._resources is None:
      self._command.Epilog(False)
      return self._resources
    printer = _PRINTERS.get(self._format)
    if printer is None:
      raise UnknownFormatError(
          'Format must be one of {0}; received [{1}].'.format(
              ', '.join(SupportedFormats()), self._format))
    printer(MakeSerializable(self._resources), self._out)
    self._command.Epilog(True)
    return self._resources
