# #####################################################################################################################
#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.                                                 #
#                                                                                                                     #
#  Licensed under the Apache License, Version 2.0 (the "License"). You may not use this file except in compliance     #
#  with the License. A copy of the License is located at                                                              #
#                                                                                                                     #
#  http://www.apache.org/licenses/LICENSE-2.0                                                                         #
#                                                                                                                     #
#  or in the 'license' file accompanying this file. This file is distributed on an 'AS IS' BASIS, WITHOUT WARRANTIES  #
#  OR CONDITIONS OF ANY KIND, express or implied. See the License for the specific language governing permissions     #
#  and limitations under the License.                                                                                 #
# #####################################################################################################################
from typing import Optional

from aws_cdk import ArnFormat, Stack, aws_iam as iam, aws_kms as kms

KMS_LOGS_ACTIONS = [
    "kms:Encrypt*",
    "kms:ReEncrypt*",
    "kms:Decrypt*",
    "kms:GenerateDataKey*",
    "kms:Describe*",
]


def grant_kms_key_perm(key: kms.IKey, log_group_name: Optional[str] = None):
    """
    grant_kms_key_perm lets CloudWatch Logs use a KMS key to encrypt log groups in the key's stack

    :key: the KMS key whose resource policy is extended
    :log_group_name: restrict the grant to one log group. All log groups ("*") when omitted
    :return: nothing
    """
    log_group_arn = Stack.of(key).format_arn(
        service="logs",
        resource="log-group",
        resource_name=log_group_name if log_group_name else "*",
        arn_format=ArnFormat.COLON_RESOURCE_NAME,
    )
    key.add_to_resource_policy(
        iam.PolicyStatement(
            principals=[iam.ServicePrincipal("logs.amazonaws.com")],
            actions=KMS_LOGS_ACTIONS,
            resources=["*"],
            conditions={
                "ArnLike": {"kms:EncryptionContext:aws:logs:arn": log_group_arn}
            },
        )
    )
