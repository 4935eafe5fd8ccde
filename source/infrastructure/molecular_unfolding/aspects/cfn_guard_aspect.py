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
from typing import Dict, List

import jsii
from aws_cdk import CfnResource, IAspect
from constructs import IConstruct

from molecular_unfolding.utils.cfn_metadata import cfn_guard_metadata
from molecular_unfolding.utils.logger import get_logger

logger = get_logger(__name__)


@jsii.implements(IAspect)
class CfnGuardSuppressResourceList:
    """Suppress cfn-guard rules by CloudFormation resource type, e.g.
    {"AWS::Lambda::Function": ["LAMBDA_INSIDE_VPC", "LAMBDA_CONCURRENCY_CHECK"]}"""

    def __init__(self, resource_suppressions: Dict[str, List[str]]):
        if not isinstance(resource_suppressions, dict):
            raise ValueError(
                f"cfn-guard suppressions must map resource types to rule names, got: {resource_suppressions!r}"
            )
        for resource_type, rules in resource_suppressions.items():
            if isinstance(rules, str) or not rules:
                raise ValueError(
                    f"cfn-guard suppressions for {resource_type} must be a non-empty list of rule names"
                )
        self.resource_suppressions = resource_suppressions

    def visit(self, node: IConstruct):
        # L2 constructs are reached through their default child, which is visited too
        if not isinstance(node, CfnResource):
            return

        rules = self.resource_suppressions.get(node.cfn_resource_type)
        if rules:
            logger.debug(f"Suppressing cfn-guard rules {rules} on {node.node.path}")
            node.add_metadata("guard", cfn_guard_metadata(rules))
