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

"""Tests for adlsdk.api_lib.datalake_analytics.jobs."""

import os

from apitools.base.py import encoding

from adlsdk.api_lib.datalake_analytics import analytics
from adlsdk.api_lib.datalake_analytics import exceptions
from adlsdk.api_lib.datalake_analytics import jobs
from adlsdk.api_lib.datalake_analytics import util
from tests.lib import sdk_test_base
from tests.lib import test_case

U1 = '11111111-1111-1111-1111-111111111111'
U2 = '22222222-2222-2222-2222-222222222222'
U3 = '33333333-3333-3333-3333-333333333333'


class SubmitJobTest(sdk_test_base.WithMockedClient):

  def SetUp(self):
    super(SubmitJobTest, self).SetUp()
    self.analytics = analytics.DataLakeAnalytics(self.ACCOUNT)
    self.source = util.JobIdSource([U1, U2], generator=lambda: U3)
    self.type_enum = self.messages.JobProperties.TypeValueValuesEnum

  def _Job(self, job_id, properties, name='myjob', degree_of_parallelism=1,
           priority=1000):
    return self.messages.JobInformation(
        jobId=job_id,
        name=name,
        properties=properties,
        type=self.messages.JobInformation.TypeValueValuesEnum.lookup_by_name(
            properties.type.name),
        degreeOfParallelism=degree_of_parallelism,
        priority=priority)

  def _USqlProperties(self, script='SELECT 1;', **kwargs):
    return self.messages.JobProperties(
        type=self.type_enum.USql, script=script, **kwargs)

  def _HiveProperties(self, configurations=None, script='SHOW TABLES;'):
    return self.messages.JobProperties(
        type=self.type_enum.Hive, script=script,
        configurations=encoding.DictToAdditionalPropertyMessage(
            configurations or {},
            self.messages.JobProperties.ConfigurationsValue,
            sort_items=True))

  def _Accepted(self, job):
    accepted = encoding.CopyProtoMessage(job)
    accepted.state = self.messages.JobInformation.StateValueValuesEnum.Accepted
    accepted.submitter = 'someone@example.com'
    return accepted

  def testSubmitUSql(self):
    job = self._Job(U1, self._USqlProperties())
    self.ExpectSubmit(job, response=self._Accepted(job))
    result = jobs.SubmitJob(self.analytics, self.source, 'myjob', 'USql',
                            script='SELECT 1;')
    self.assertEqual(self._Accepted(job), result)

  def testSubmitUSqlFromFile(self):
    path = self.Touch(self.temp_path, 'job.usql', 'SELECT 2;\n')
    job = self._Job(U1, self._USqlProperties(
        script='SELECT 2;\n',
        compileMode=self.messages.JobProperties.CompileModeValueValuesEnum.Full,
        runtimeVersion='default'), degree_of_parallelism=4, priority=10)
    self.ExpectSubmit(job, response=job)
    jobs.SubmitJob(self.analytics, self.source, 'myjob', 'usql',
                   script_path=path, compile_mode='FULL', runtime='default',
                   degree_of_parallelism=4, priority=10)

  def testSubmitHive(self):
    job = self._Job(U1, self._HiveProperties({'a': '1'}))
    self.ExpectSubmit(job, response=job)
    jobs.SubmitJob(self.analytics, self.source, 'myjob', 'Hive',
                   script='SHOW TABLES;', configurations={'a': '1'})

  def testSubmitHiveWithoutConfigurations(self):
    job = self._Job(U1, self._HiveProperties())
    self.ExpectSubmit(job, response=job)
    jobs.SubmitJob(self.analytics, self.source, 'myjob', 'Hive',
                   script='SHOW TABLES;')

  def testBuildUSql(self):
    job = self._Job(U1, self._USqlProperties())
    self.ExpectBuild(job, response=job)
    result = jobs.SubmitJob(self.analytics, self.source, 'myjob', 'USql',
                            script='SELECT 1;', compile_only=True)
    self.assertEqual(job, result)

  def testIdsAreDrainedInOrder(self):
    for job_id in (U1, U2, U3):
      job = self._Job(job_id, self._USqlProperties())
      self.ExpectSubmit(job, response=job)
    results = [
        jobs.SubmitJob(self.analytics, self.source, 'myjob', 'USql',
                       script='SELECT 1;')
        for _ in range(3)]
    self.assertEqual([U1, U2, U3], [r.jobId for r in results])

  def testBuildHiveIsRejected(self):
    with self.assertRaisesRegex(exceptions.UnsupportedOperationError,
                                r'Hive jobs cannot be built'):
      jobs.SubmitJob(self.analytics, self.source, 'myjob', 'Hive',
                     script='SHOW TABLES;', compile_only=True)
    # No ID was used up by the rejected request.
    self.assertEqual(2, len(self.source))

  def testBuildHiveIsRejectedBeforeReadingTheScript(self):
    with self.assertRaises(exceptions.UnsupportedOperationError):
      jobs.SubmitJob(self.analytics, self.source, 'myjob', 'Hive',
                     script_path=os.path.join(self.temp_path, 'missing.hql'),
                     compile_only=True)

  def testAmbiguousInput(self):
    with self.assertRaises(exceptions.AmbiguousInputError):
      jobs.SubmitJob(self.analytics, self.source, 'myjob', 'USql')
    with self.assertRaises(exceptions.AmbiguousInputError):
      jobs.SubmitJob(self.analytics, self.source, 'myjob', 'USql',
                     script='SELECT 1;', script_path='job.usql')
    self.assertEqual(2, len(self.source))

  def testScriptNotFound(self):
    path = os.path.join(self.temp_path, 'missing.usql')
    with self.assertRaises(exceptions.ScriptNotFoundError):
      jobs.SubmitJob(self.analytics, self.source, 'myjob', 'USql',
                     script_path=path)
    self.assertEqual(2, len(self.source))

  def testInvalidType(self):
    with self.assertRaises(exceptions.InvalidJobTypeError):
      jobs.SubmitJob(self.analytics, self.source, 'myjob', 'Pig',
                     script='x')
    self.assertEqual(2, len(self.source))

  def testRemoteError(self):
    job = self._Job(U1, self._USqlProperties())
    self.ExpectSubmit(job, exception=self.MakeHttpError(
        409, '{"error": {"code": "JobAlreadyExists"}}'))
    with self.assertRaisesRegex(
        exceptions.RemoteServiceError,
        r'HTTPError 409: \{"error": \{"code": "JobAlreadyExists"\}\}'):
      jobs.SubmitJob(self.analytics, self.source, 'myjob', 'USql',
                     script='SELECT 1;')

  def testRemoteErrorOnBuild(self):
    job = self._Job(U1, self._USqlProperties())
    self.ExpectBuild(job, exception=self.MakeHttpError(400, 'bad script'))
    with self.assertRaises(exceptions.RemoteServiceError) as ctx:
      jobs.SubmitJob(self.analytics, self.source, 'myjob', 'USql',
                     script='SELECT 1;', compile_only=True)
    self.assertEqual(400, ctx.exception.status_code)


class BuildJobInformationTest(test_case.Base):

  def testDefaults(self):
    messages = analytics.GetMessagesModule()
    properties = messages.JobProperties(
        type=messages.JobProperties.TypeValueValuesEnum.Hive, script='x')
    job = jobs.BuildJobInformation(messages, U1, 'myjob', properties)
    self.assertEqual(messages.JobInformation.TypeValueValuesEnum.Hive,
                     job.type)
    self.assertEqual(1, job.degreeOfParallelism)
    self.assertEqual(1000, job.priority)
    self.assertIs(properties, job.properties)


if __name__ == '__main__':
  test_case.main()
