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

"""The command group for Data Lake Analytics."""

from adlsdk.api_lib.datalake_analytics import util
from adlsdk.calliope import base


class Analytics(base.Group):
  """Run and manage Data Lake Analytics jobs."""

  def Filter(self, context, args):
    """Sets up the job ID source shared by every command of this CLI.

    Args:
      context: {str:object}, The CLI context.  A job_id_source already placed
        there (for example by tests) is kept.
      args: argparse.Namespace, The parsed arguments.

    Returns:
      The updated context.
    """
    context.setdefault('job_id_source', util.JobIdSource())
    return context
