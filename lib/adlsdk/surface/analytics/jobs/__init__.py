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

"""The command group for Data Lake Analytics jobs."""

from adlsdk.calliope import base


class Jobs(base.Group):
  """Submit and build U-SQL and Hive jobs."""

  detailed_help = {
      'DESCRIPTION': """\
          {description}

          U-SQL jobs can be compiled without running them by passing
          --compile-only. Hive jobs can only be submitted.
          """,
      'EXAMPLES': """\
          To submit a Hive job with a custom configuration, run:

            $ adl analytics jobs submit --account myaccount --name nightly \\
                --type Hive --script-path nightly.hql \\
                --configurations hive.exec.parallel=true

          To check that a U-SQL script compiles, run:

            $ adl analytics jobs submit --account myaccount --name check \\
                --type USql --script-path job.usql --compile-only
          """,
  }
