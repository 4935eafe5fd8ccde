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
import aws_cdk as cdk
import pytest
from aws_cdk import aws_ec2 as ec2
from aws_cdk import aws_iam as iam
from aws_cdk import aws_sns as sns
from aws_cdk.assertions import Template
from molecular_unfolding.aspects.cfn_guard_aspect import CfnGuardSuppressResourceList
from molecular_unfolding.aspects.cfn_nag_aspect import AddCfnNag
from molecular_unfolding.aspects.conditional_resource import AddCondition
from molecular_unfolding.aspects.managed_policy_aspect import AddSSMPolicyToRole
from molecular_unfolding.aspects.policy_name_aspect import ChangePolicyName
from molecular_unfolding.aspects.public_subnet_aspect import ChangePublicSubnet
from molecular_unfolding.aspects.solution_aspects import add_solution_aspects


class TestAddSolutionAspects:
    """Tests for solution_aspects.py"""

    def setup_class(self):
        """Tests setup"""
        app = cdk.App(
            context={
                "CfnGuardSuppressions": {"AWS::SNS::Topic": ["SNS_ENCRYPTED_KMS"]},
                "SsmManagedPolicyName": "CloudWatchAgentServerPolicy",
            }
        )
        stack = cdk.Stack(app, "MolecularUnfoldingStack")

        condition = cdk.CfnCondition(
            stack,
            "IsDeployEventRule",
            expression=cdk.Fn.condition_equals(cdk.Aws.REGION, "us-east-1"),
        )
        ec2.CfnSubnet(
            stack,
            "Subnet",
            vpc_id="vpc-12345678",
            cidr_block="10.0.0.0/24",
            map_public_ip_on_launch=True,
        )
        iam.Role(
            stack,
            "Ecs-Instance-Role",
            assumed_by=iam.ServicePrincipal("ec2.amazonaws.com"),
        )
        sns.Topic(stack, "Topic")

        self.aspects = add_solution_aspects(stack, condition)
        self.template = Template.from_stack(stack)

    def test_registered_aspects(self):
        assert [type(aspect) for aspect in self.aspects] == [
            ChangePublicSubnet,
            AddCfnNag,
            AddSSMPolicyToRole,
            ChangePolicyName,
            AddCondition,
            CfnGuardSuppressResourceList,
        ]

    def test_aspects_are_applied(self):
        self.template.has_resource_properties(
            "AWS::EC2::Subnet", {"MapPublicIpOnLaunch": False}
        )
        self.template.has_resource(
            "AWS::SNS::Topic",
            {"Metadata": {"guard": {"SuppressedRules": ["SNS_ENCRYPTED_KMS"]}}},
        )

    def test_managed_policy_from_context(self):
        self.template.has_resource_properties(
            "AWS::IAM::Role",
            {
                "ManagedPolicyArns": [
                    {
                        "Fn::Join": [
                            "",
                            [
                                "arn:",
                                {"Ref": "AWS::Partition"},
                                ":iam::aws:policy/CloudWatchAgentServerPolicy",
                            ],
                        ]
                    }
                ]
            },
        )

    def test_defaults_without_condition_or_context(self):
        app = cdk.App()
        stack = cdk.Stack(app, "DefaultsStack")

        aspects = add_solution_aspects(stack)

        assert [type(aspect) for aspect in aspects] == [
            ChangePublicSubnet,
            AddCfnNag,
            AddSSMPolicyToRole,
            ChangePolicyName,
        ]
        assert aspects[2].managed_policy_name == "AmazonSSMManagedInstanceCore"
        assert len(cdk.Aspects.of(stack).all) == 4


class TestAddSolutionAspectsContext:
    """Tests for CfnGuardSuppressions passed on the cdk command line"""

    def test_json_string_context(self):
        app = cdk.App(
            context={"CfnGuardSuppressions": '{"AWS::SNS::Topic": ["SNS_ENCRYPTED_KMS"]}'}
        )
        stack = cdk.Stack(app, "CommandLineContextStack")
        sns.Topic(stack, "Topic")

        aspects = add_solution_aspects(stack)

        assert isinstance(aspects[-1], CfnGuardSuppressResourceList)
        assert aspects[-1].resource_suppressions == {
            "AWS::SNS::Topic": ["SNS_ENCRYPTED_KMS"]
        }
        Template.from_stack(stack).has_resource(
            "AWS::SNS::Topic",
            {"Metadata": {"guard": {"SuppressedRules": ["SNS_ENCRYPTED_KMS"]}}},
        )

    @pytest.mark.parametrize(
        "suppressions",
        [
            "AWS::SNS::Topic=SNS_ENCRYPTED_KMS",
            '["SNS_ENCRYPTED_KMS"]',
            ["SNS_ENCRYPTED_KMS"],
        ],
    )
    def test_invalid_context_raises_value_error(self, suppressions):
        app = cdk.App(context={"CfnGuardSuppressions": suppressions})
        stack = cdk.Stack(app, "InvalidContextStack")

        with pytest.raises(ValueError):
            add_solution_aspects(stack)
