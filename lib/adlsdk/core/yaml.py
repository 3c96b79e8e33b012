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

"""Wrapper module for ensuring consistent usage of yaml dumping.

Only safe dumping is exposed.  Block style is always used so job records print
one field per line.
"""

import collections
import io

from ruamel import yaml


def _Dumper():
  dumper = yaml.YAML(typ='safe', pure=True)
  dumper.default_flow_style = False
  dumper.representer.add_representer(
      collections.OrderedDict,
      yaml.representer.SafeRepresenter.represent_dict)
  return dumper


def dump(data, stream=None):
  """Dumps the given YAML data to the stream.

  Args:
    data: object, The YAML data to dump.
    stream: file-like object, The stream to dump to.  If None, the YAML text is
      returned.

  Returns:
    str, The YAML text if no stream was given, None otherwise.
  """
  dumper = _Dumper()
  if stream is not None:
    dumper.dump(data, stream)
    return None
  buf = io.StringIO()
  dumper.dump(data, buf)
  return buf.getvalue()
