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

"""Submit a job to a Data Lake Analytics account."""

from adlsdk.api_lib.datalake_analytics import analytics as analytics_api
from adlsdk.api_lib.datalake_analytics import jobs
from adlsdk.calliope import base
from adlsdk.command_lib.datalake_analytics import flags
from adlsdk.core import log
from adlsdk.core import properties


class Submit(base.Command):
  """Submit a U-SQL or Hive job to a Data Lake Analytics account."""

  detailed_help = {
      'DESCRIPTION': """\
          {description}

          The script is given either inline with --script or as a file with
          --script-path. With --compile-only the job is built but not run,
          which is only supported for U-SQL jobs.
          """,
      'EXAMPLES': """\
          To run a U-SQL script stored in a file, run:

            $ adl analytics jobs submit --account myaccount --name myjob \\
                --type USql --script-path job.usql --priority 100
          """,
  }

  @staticmethod
  def Args(parser):
    flags.AddAccountFlag(parser)
    flags.AddNameFlag(parser)
    flags.AddScriptFlags(parser)
    flags.AddTypeFlag(parser)
    flags.AddRuntimeFlag(parser)
    flags.AddCompileFlags(parser)
    flags.AddDegreeOfParallelismFlag(parser)
    flags.AddPriorityFlag(parser)
    flags.AddConfigurationsFlag(parser)

  def Run(self, args):
    account = (args.account or
               properties.VALUES.datalake_analytics.account.Get(required=True))
    analytics = analytics_api.DataLakeAnalytics(
        account, cmd_path='adl.analytics.jobs.submit')

    job = jobs.SubmitJob(
        analytics,
        self.context['job_id_source'],
        name=args.name,
        job_type=args.type,
        script=args.script,
        script_path=args.script_path,
        runtime=args.runtime,
        compile_mode=args.compile_mode,
        compile_only=args.compile_only,
        degree_of_parallelism=args.degree_of_parallelism,
        priority=args.priority,
        configurations=args.configurations)

    log.status.Print('Job [{0}] {1}.'.format(
        job.jobId, 'built' if args.compile_only else 'submitted'))
    return job
