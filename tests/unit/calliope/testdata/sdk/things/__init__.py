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

"""Commands that operate on things."""

from adlsdk.calliope import base


class Things(base.Group):
  """Operate on things."""

  detailed_help = {
      'DESCRIPTION': '{description}',
      'EXAMPLES': 'Run $ sdk things echo --value x',
  }

  def Filter(self, context, args):
    context.setdefault('groups', []).append('things')
