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

"""adl command line tool."""

import os
import signal
import sys

from adlsdk.calliope import cli
from adlsdk.core import config
from adlsdk.core import log
from adlsdk.core import properties


def CTRLCHandler(unused_signal, unused_frame):
  """SIGINT handler that exits quietly instead of printing a traceback."""
  log.err.Print('\n\nCommand killed by keyboard interrupt\n')
  # Re-deliver SIGINT with the default action so the parent sees the signal.
  signal.signal(signal.SIGINT, signal.SIG_DFL)
  os.kill(os.getpid(), signal.SIGINT)
  sys.exit(1)


def _InstallSignalHandlers():
  signal.signal(signal.SIGINT, CTRLCHandler)
  # Exit silently when piped into a reader that stops early.
  if hasattr(signal, 'SIGPIPE'):
    signal.signal(signal.SIGPIPE, signal.SIG_DFL)


def CreateCLI(job_id_source=None):
  """Generates the adl CLI from the 'surface' package.

  Args:
    job_id_source: util.JobIdSource, The IDs handed to submitted jobs.  A
      source generating random IDs is used if None.

  Returns:
    calliope cli object.
  """
  context = {}
  if job_id_source is not None:
    context['job_id_source'] = job_id_source
  loader = cli.CLILoader(
      name=config.CLI_NAME,
      command_root_package='adlsdk.surface',
      context=context)
  return loader.Generate()


def _PrintCrash(err):
  log.error('{0} crashed ({1}): {2}'.format(
      config.CLI_NAME, type(err).__name__, err))
  log.err.Print('\nRe-run with --verbosity=debug for more details.')


def main(adl_cli=None):
  _InstallSignalHandlers()
  if adl_cli is None:
    adl_cli = CreateCLI()
  try:
    adl_cli.Execute()
  except Exception as err:  # pylint:disable=broad-except
    _PrintCrash(err)

    if properties.VALUES.core.print_unhandled_tracebacks.GetBool():
      raise
    else:
      sys.exit(1)


if __name__ == '__main__':
  try:
    main()
  except KeyboardInterrupt:
    CTRLCHandler(None, None)
