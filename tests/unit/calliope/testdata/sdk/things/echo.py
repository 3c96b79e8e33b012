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

"""Echo back a value."""

from adlsdk.calliope import base
from adlsdk.core import log


class Echo(base.Command):
  """Echo the given value as a resource."""

  @staticmethod
  def Args(parser):
    parser.add_argument('--value', required=True)

  def Run(self, args):
    log.status.Print('Echoing.')
    return {'value': args.value, 'groups': list(self.context['groups'])}

  def Epilog(self, resources_were_displayed):
    self.context['displayed'] = resources_were_displayed
