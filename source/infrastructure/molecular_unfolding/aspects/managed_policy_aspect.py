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
from aws_cdk import IAspect
from aws_cdk import aws_iam as iam
from constructs import IConstruct

from molecular_unfolding.utils.logger import get_logger

logger = get_logger(__name__)

ECS_INSTANCE_ROLE_SUFFIX = "/Ecs-Instance-Role"
SSM_MANAGED_POLICY_NAME = "AmazonSSMManagedInstanceCore"


@jsii.implements(IAspect)
class AddSSMPolicyToRole:
    """Attaches the SSM managed instance policy to the ECS instance role"""

    def __init__(
        self,
        role_path_suffix: str = ECS_INSTANCE_ROLE_SUFFIX,
        managed_policy_name: str = SSM_MANAGED_POLICY_NAME,
    ):
        self.role_path_suffix = role_path_suffix
        self.managed_policy_name = managed_policy_name

    def visit(self, node: IConstruct):
        if isinstance(node, iam.Role) and node.node.path.endswith(
            self.role_path_suffix
        ):
            logger.debug(
                f"Attaching managed policy {self.managed_policy_name} to {node.node.path}"
            )
            node.add_managed_policy(
                iam.ManagedPolicy.from_aws_managed_policy_name(self.managed_policy_name)
            )
