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
from aws_cdk import aws_ec2 as ec2
from constructs import IConstruct

from molecular_unfolding.utils.logger import get_logger

logger = get_logger(__name__)


@jsii.implements(IAspect)
class ChangePublicSubnet:
    """Stops subnets from auto-assigning public IPs to instances launched in them"""

    def visit(self, node: IConstruct):
        if isinstance(node, ec2.CfnSubnet) and node.map_public_ip_on_launch:
            logger.debug(f"Disabling MapPublicIpOnLaunch on {node.node.path}")
            node.add_property_override("MapPublicIpOnLaunch", False)
