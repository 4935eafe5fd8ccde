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
import json
from typing import List, Optional

from aws_cdk import Aspects, CfnCondition, IAspect
from constructs import Construct

from molecular_unfolding.aspects.cfn_guard_aspect import CfnGuardSuppressResourceList
from molecular_unfolding.aspects.cfn_nag_aspect import AddCfnNag
from molecular_unfolding.aspects.conditional_resource import AddCondition
from molecular_unfolding.aspects.managed_policy_aspect import (
    SSM_MANAGED_POLICY_NAME,
    AddSSMPolicyToRole,
)
from molecular_unfolding.aspects.policy_name_aspect import ChangePolicyName
from molecular_unfolding.aspects.public_subnet_aspect import ChangePublicSubnet
from molecular_unfolding.utils.cdk_context_value import get_cdk_context_value
from molecular_unfolding.utils.logger import get_logger

logger = get_logger(__name__)


def add_solution_aspects(
    scope: Construct, condition: Optional[CfnCondition] = None
) -> List[IAspect]:
    """
    add_solution_aspects registers the solution's aspects on a scope, usually the root stack

    :scope: CDK Construct scope the aspects are applied to
    :condition: when given, the event rule custom resource and its policies are only deployed if it is true
    :returns: the registered aspects, in registration order
    """
    managed_policy_name = get_cdk_context_value(
        scope, "SsmManagedPolicyName", SSM_MANAGED_POLICY_NAME
    )
    aspects: List[IAspect] = [
        ChangePublicSubnet(),
        AddCfnNag(),
        AddSSMPolicyToRole(managed_policy_name=managed_policy_name),
        ChangePolicyName(),
    ]

    if condition is not None:
        aspects.append(AddCondition(condition))

    guard_suppressions = get_cdk_context_value(scope, "CfnGuardSuppressions", {})
    # context passed with `cdk synth -c` arrives as a string
    if isinstance(guard_suppressions, str):
        try:
            guard_suppressions = json.loads(guard_suppressions)
        except json.JSONDecodeError as error:
            raise ValueError(
                f"The CDK context key: CfnGuardSuppressions is not valid JSON: {error}"
            ) from error
    if guard_suppressions:
        aspects.append(CfnGuardSuppressResourceList(guard_suppressions))

    for aspect in aspects:
        Aspects.of(scope).add(aspect)

    logger.info(
        f"Registered aspects {[type(aspect).__name__ for aspect in aspects]} on {scope.node.path}"
    )
    return aspects
