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
_NO_DEFAULT = object()


def get_cdk_context_value(scope, key, default=_NO_DEFAULT):
    """
    get_cdk_context_value gets the cdk context value for a provided key

    :scope: CDK Construct scope
    :key: the context key, as set in cdk.json or App(context=...)
    :default: value returned when the key is missing. Without it a missing key is an error

    :returns: context value
    :Raises: ValueError: The CDK context key: {key} is undefined.
    """
    value = scope.node.try_get_context(key)
    if value is not None:
        return value

    if default is _NO_DEFAULT:
        raise ValueError(f"The CDK context key: {key} is undefined.")

    return default
