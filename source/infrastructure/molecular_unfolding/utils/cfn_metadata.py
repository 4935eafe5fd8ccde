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
from typing import Dict, List, Optional

from aws_cdk import CfnResource
from constructs import IConstruct


def cfn_resource_of(node: IConstruct) -> Optional[CfnResource]:
    """
    cfn_resource_of finds the CloudFormation resource behind a construct

    :node: an L1 CfnResource, or an L2 construct wrapping one as its default child
    :returns: the CfnResource, or None when the construct does not render a resource
    """
    if isinstance(node, CfnResource):
        return node

    child = node.node.default_child
    if isinstance(child, CfnResource):
        return child

    return None


def cfn_nag_metadata(rules_to_suppress: List[Dict[str, str]]) -> dict:
    return {"rules_to_suppress": [dict(rule) for rule in rules_to_suppress]}


def cfn_guard_metadata(suppressed_rules: List[str]) -> dict:
    return {"SuppressedRules": list(suppressed_rules)}
