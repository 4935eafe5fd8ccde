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
import logging
import os

VALID_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def get_level():
    """
    get_level reads the requested log level from the LOG_LEVEL environment variable

    :returns: a valid logging level name, WARNING when unset or unrecognised
    """
    requested_level = os.environ.get("LOG_LEVEL", "WARNING")
    if requested_level and requested_level.upper() in VALID_LEVELS:
        return requested_level.upper()

    return "WARNING"


def get_logger(name):
    # handlers belong to the app running cdk synth; only the level is set here
    logger = logging.getLogger(name)
    logger.setLevel(get_level())
    # jsii's kernel process is chatty at INFO
    logging.getLogger("jsii").setLevel(logging.WARNING)

    return logger
