# #####################################################################################################################
#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.                                                 #
#                                                                                                                     #
#  Licensed under the Apache License, Version 2.0 (the "License"). You may not use this file except in compliance     #
#  with the License. You may obtain a copy of the License at                                                          #
#                                                                                                                     #
#   http://www.apache.org/licenses/LICENSE-2.0                                                                        #
#                                                                                                                     #
#  Unless required by applicable law or agreed to in writing, software distributed under the License is distributed   #
#  on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the License for  #
#  the specific language governing permissions and limitations under the License.                                     #
# #####################################################################################################################
from typing import Dict, List, Optional, Sequence, Tuple

import jsii
from aws_cdk import IAspect
from constructs import IConstruct

from molecular_unfolding.utils.cfn_metadata import cfn_nag_metadata, cfn_resource_of
from molecular_unfolding.utils.logger import get_logger

logger = get_logger(__name__)

SuppressionGroup = Tuple[Sequence[str], List[Dict[str, str]]]

CDK_GENERATED_LAMBDA = "the lambda is auto generated by CDK"
CDK_LOG_GROUP_POLICY = "the policy about log group is generated by CDK"
GENERATED_BY_CDK = "generated by CDK"

# (path suffixes, rules to suppress). The first group with a matching suffix wins.
DEFAULT_CFN_NAG_SUPPRESSIONS: List[SuppressionGroup] = [
    (
        [
            "/Custom::S3AutoDeleteObjectsCustomResourceProvider/Handler",
            "/EventRuleCustomResourceProvider/framework-onEvent/Resource",
        ],
        [
            {"id": "W58", "reason": CDK_GENERATED_LAMBDA},
            {"id": "W89", "reason": CDK_GENERATED_LAMBDA},
        ],
    ),
    (
        ["/CreateEventRuleFunc/Resource"],
        [{"id": "W89", "reason": "Lambda is used as custom resource"}],
    ),
    (
        [
            "/AggResultLambda/Resource",
            "/TaskParametersLambda/Resource",
            "/DeviceAvailableCheckLambda/Resource",
            "/WaitForTokenLambda/Resource",
            "/BraketTaskEventHandler/ParseBraketResultLambda/Resource",
        ],
        [{"id": "W58", "reason": "the lambda already have the cloudwatch permission"}],
    ),
    (
        [
            "/ccBatchJobRole/DefaultPolicy/Resource",
            "/qcBatchJobRole/DefaultPolicy/Resource",
            "/createModelBatchJobRole/DefaultPolicy/Resource",
            "/batchExecutionRole/DefaultPolicy/Resource",
            "/TaskParametersLambdaRole/DefaultPolicy/Resource",
            "/DeviceAvailableCheckLambdaRole/DefaultPolicy/Resource",
            "/ParseBraketResultLambdaRole/DefaultPolicy/Resource",
            "/AggResultLambdaRole/DefaultPolicy/Resource",
            "/WaitForTokenLambdaRole/DefaultPolicy/Resource",
            "/Notebook/NotebookRole/DefaultPolicy/Resource",
            "/BucketNotificationsHandler050a0587b7544547bf325f094a3db834/Role/DefaultPolicy/Resource",
            "/CreateEventRuleFuncRole/DefaultPolicy/Resource",
        ],
        [{"id": "W12", "reason": "some permissions are not resource-level permissions"}],
    ),
    (
        [
            "/CCStateMachine/Role/DefaultPolicy/Resource",
            "/QCStateMachine/Role/DefaultPolicy/Resource",
        ],
        [{"id": "W12", "reason": CDK_LOG_GROUP_POLICY}],
    ),
    (
        [
            "/BatchEvaluationStateMachine/Role/DefaultPolicy/Resource",
            "/RunCCAndQCStateMachine/Role/DefaultPolicy/Resource",
            "/QCDeviceStateMachine/Role/DefaultPolicy/Resource",
        ],
        [
            {"id": "W12", "reason": CDK_LOG_GROUP_POLICY},
            {"id": "W76", "reason": "The policy is generated automatically by CDK"},
        ],
    ),
    (
        ["/AccessLogS3Bucket/Resource"],
        [{"id": "W35", "reason": "this is access log bucket"}],
    ),
    (
        ["/batchSg/Resource", "/lambdaSg/Resource"],
        [{"id": "W5", "reason": "cidr open to world on egress"}],
    ),
    (
        [
            "/VPC/EcrDockerEndpoint/SecurityGroup/Resource",
            "/VPC/AthenaEndpoint/SecurityGroup/Resource",
            "/VPC/BraketEndpoint/SecurityGroup/Resource",
        ],
        [
            {"id": "W5", "reason": GENERATED_BY_CDK},
            {"id": "W40", "reason": GENERATED_BY_CDK},
        ],
    ),
    (
        ["/SNSKey/Resource"],
        [{"id": "F76", "reason": "Key for SNS, add constraint in conditions"}],
    ),
]


def validate_suppressions(suppressions: List[SuppressionGroup]):
    """
    validate_suppressions checks a cfn_nag suppression table before it is used by AddCfnNag

    :suppressions: list of (path suffixes, rules to suppress) groups
    :Raises: ValueError: a group has no suffixes or no rules, or a rule lacks an id or reason
    """
    for suffixes, rules in suppressions:
        if isinstance(suffixes, str) or not suffixes:
            raise ValueError(
                f"A cfn_nag suppression group needs a list of path suffixes, got: {suffixes!r}"
            )
        if not rules:
            raise ValueError(f"No cfn_nag rules given for paths: {list(suffixes)}")
        for rule in rules:
            if not rule.get("id") or not rule.get("reason"):
                raise ValueError(
                    f"cfn_nag rule {rule!r} for paths {list(suffixes)} must have an id and a reason"
                )


@jsii.implements(IAspect)
class AddCfnNag:
    """Adds cfn_nag rule suppressions to the resources of the solution the scanner flags"""

    def __init__(self, suppressions: Optional[List[SuppressionGroup]] = None):
        self.suppressions = (
            DEFAULT_CFN_NAG_SUPPRESSIONS if suppressions is None else suppressions
        )
        validate_suppressions(self.suppressions)

    def rules_for(self, path: str) -> Optional[List[Dict[str, str]]]:
        for suffixes, rules in self.suppressions:
            if any(path.endswith(suffix) for suffix in suffixes):
                return rules

        return None

    def visit(self, node: IConstruct):
        path = node.node.path
        rules = self.rules_for(path)
        if rules is None:
            return

        resource = cfn_resource_of(node)
        if resource is None:
            logger.warning(
                f"{path} matches a cfn_nag suppression but is not a CloudFormation resource, skipping"
            )
            return

        logger.debug(f"Suppressing cfn_nag rules {[rule['id'] for rule in rules]} on {path}")
        resource.add_metadata("cfn_nag", cfn_nag_metadata(rules))
