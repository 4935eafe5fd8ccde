import os
import re

import pytest


@pytest.fixture(autouse=True)
def aws_credentials():
    """Mocked AWS Credentials"""
    os.environ["AWS_ACCESS_KEY_ID"] = "testing"
    os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
    os.environ["AWS_REGION"] = "us-east-1"  # must be a valid region


def resource_with_id_prefix(template, logical_id_prefix):
    """The single resource whose logical id is the prefix followed by the 8 character CDK hash"""
    pattern = re.compile(f"^{re.escape(logical_id_prefix)}[0-9A-F]{{8}}$")
    resources = {
        logical_id: resource
        for logical_id, resource in template.to_json()["Resources"].items()
        if pattern.match(logical_id)
    }
    assert len(resources) == 1, f"expected one resource for {logical_id_prefix}, found {list(resources)}"
    return next(iter(resources.values()))


@pytest.fixture
def find_resource():
    return resource_with_id_prefix
