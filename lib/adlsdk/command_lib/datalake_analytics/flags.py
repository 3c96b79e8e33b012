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

"""Flags for Data Lake Analytics job commands."""

from adlsdk.api_lib.datalake_analytics import jobs
from adlsdk.calliope import arg_parsers


def AddAccountFlag(parser):
  parser.add_argument(
      '--account',
      '--account-name',
      dest='account',
      help="""\
          The Data Lake Analytics account to use. Overrides the default
          *datalake_analytics/account* property value for this command
          invocation.
          """)


def AddNameFlag(parser):
  parser.add_argument(
      '--name',
      required=True,
      type=arg_parsers.NonEmptyString(),
      help='The friendly name of the job.')


def AddScriptFlags(parser):
  """Adds the two ways of passing a script.  Exactly one must be given."""
  parser.add_argument(
      '--script',
      help='The script text to run.')
  parser.add_argument(
      '--script-path',
      help="""\
          The path of a file containing the script to run. A leading ~ is
          expanded and relative paths are resolved against the current
          directory.
          """)


def AddTypeFlag(parser):
  parser.add_argument(
      '--type',
      required=True,
      help='The type of job to submit, USql or Hive (case insensitive).')


def AddRuntimeFlag(parser):
  parser.add_argument(
      '--runtime',
      help='The runtime version of the analytics engine to run the job with.')


def AddCompileFlags(parser):
  """Adds the U-SQL compilation flags."""
  parser.add_argument(
      '--compile-mode',
      help="""\
          The U-SQL compile mode: Semantic, SingleBox or Full. Unrecognized
          values are ignored and the service default is used.
          """)
  parser.add_argument(
      '--compile-only',
      action='store_true',
      default=False,
      help='Build (compile) the U-SQL job without running it.')


def AddDegreeOfParallelismFlag(parser):
  parser.add_argument(
      '--degree-of-parallelism',
      type=arg_parsers.BoundedInt(lower_bound=1),
      default=jobs.DEFAULT_DEGREE_OF_PARALLELISM,
      help='The degree of parallelism of the job. (Default: [{0}]).'.format(
          jobs.DEFAULT_DEGREE_OF_PARALLELISM))


def AddPriorityFlag(parser):
  parser.add_argument(
      '--priority',
      type=arg_parsers.BoundedInt(lower_bound=1),
      default=jobs.DEFAULT_PRIORITY,
      help="""\
          The priority of the job. Lower numbers have a higher priority.
          (Default: [{0}]).
          """.format(jobs.DEFAULT_PRIORITY))


def AddConfigurationsFlag(parser):
  parser.add_argument(
      '--configurations',
      type=arg_parsers.ArgDict(),
      action=arg_parsers.UpdateAction,
      metavar='KEY=VALUE',
      help="""\
          Custom configurations of a Hive job, as a comma separated list of
          KEY=VALUE pairs. May be given more than once. U-SQL jobs ignore
          this flag.
          """)
