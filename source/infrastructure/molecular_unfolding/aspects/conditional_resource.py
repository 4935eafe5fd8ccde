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
from typing import Sequence

import jsii
from aws_cdk import CfnCondition, CfnResource, IAspect
from constructs import IConstruct

from molecular_unfolding.utils.logger import get_logger

logger = get_logger(__name__)

# These aspects attach a CfnCondition to resources, so they are only provisioned
# when the condition is true.
# https://docs.aws.amazon.com/cdk/latest/guide/aspects.html

EVENT_RULE_PATH_SUFFIXES = [
    "/CreateEventRuleFunc/ServiceRole/DefaultPolicy/Resource",
    "/EventBridgeRole/DefaultPolicy/Resource",
]
EVENT_RULE_PATH_FRAGMENTS = ["/EventRuleCustomResourceProvider/framework-onEvent/"]


@jsii.implements(IAspect)
class ConditionalResources:
    """Makes the default resource of every construct in the scope conditional"""

    def __init__(self, condition: CfnCondition):
        self.condition = condition

    def visit(self, node: IConstruct):
        child = node.node.default_child
        if isinstance(child, CfnResource):
            child.cfn_options.condition = self.condition


@jsii.implements(IAspect)
class AddCondition:
    """Makes the event rule custom resource and its policies conditional"""

    def __init__(
        self,
        condition: CfnCondition,
        path_suffixes: Sequence[str] = tuple(EVENT_RULE_PATH_SUFFIXES),
        path_fragments: Sequence[str] = tuple(EVENT_RULE_PATH_FRAGMENTS),
    ):
        self.condition = condition
        self.path_suffixes = tuple(path_suffixes)
        self.path_fragments = tuple(path_fragments)

    def matches(self, path: str) -> bool:
        return path.endswith(self.path_suffixes) or any(
            fragment in path for fragment in self.path_fragments
        )

    def visit(self, node: IConstruct):
        # only L1 resources carry cfn_options; constructs around them are skipped
        if isinstance(node, CfnResource) and self.matches(node.node.path):
            logger.debug(
                f"Setting condition {self.condition.node.id} on {node.node.path}"
            )
            node.cfn_options.condition = self.condition
