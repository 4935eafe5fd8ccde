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
import jsii
from aws_cdk import IAspect, Stack
from aws_cdk import aws_iam as iam
from constructs import IConstruct

from molecular_unfolding.utils.logger import get_logger

logger = get_logger(__name__)

QUICKSIGHT_POLICY_SUFFIX = "QuickSightServiceRole/Policy/Resource"


@jsii.implements(IAspect)
class ChangePolicyName:
    """Suffixes the QuickSight service role policy name with the stack region"""

    def __init__(self, policy_path_suffix: str = QUICKSIGHT_POLICY_SUFFIX):
        self.policy_path_suffix = policy_path_suffix

    def visit(self, node: IConstruct):
        if isinstance(node, iam.CfnPolicy) and node.node.path.endswith(
            self.policy_path_suffix
        ):
            # region is an AWS::Region token unless the stack env pins it
            region = Stack.of(node).region
            logger.debug(f"Adding region suffix to policy name at {node.node.path}")
            node.policy_name = f"{node.policy_name}-{region}"
