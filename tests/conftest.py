from typing import Any, Dict, List, Optional, Tuple

import pulumi
import pytest


class RecordingMocks(pulumi.runtime.Mocks):
    """Pulumi mocks that keep every registered resource and invoke, in order."""

    def __init__(self):
        self.resources: List[pulumi.runtime.MockResourceArgs] = []
        self.calls: List[pulumi.runtime.MockCallArgs] = []

    def new_resource(self, args: pulumi.runtime.MockResourceArgs) -> Tuple[Optional[str], Dict[str, Any]]:
        self.resources.append(args)
        outputs = {"name": args.name, **args.inputs}
        if args.typ == "aws:kms/key:Key":
            outputs["arn"] = f"arn:aws:kms:us-west-2:123456789012:key/{args.name}"
        if args.typ == "aws:iam/role:Role":
            outputs["arn"] = f"arn:aws:iam::123456789012:role/{args.name}"
        if args.typ == "aws:ec2/instance:Instance":
            outputs["publicIp"] = "203.0.113.10"
        return f"{args.name}_id", outputs

    def call(self, args: pulumi.runtime.MockCallArgs) -> Dict[str, Any]:
        self.calls.append(args)
        if args.token == "aws:ec2/getAmi:getAmi":
            return {
                "id": "ami-0nixos2511arm64",
                "architecture": "arm64",
                "name": "nixos/25.11.20251001.abcdef-aarch64-linux",
                "ownerId": "427812963091",
            }
        return {}

    def by_type(self, typ: str) -> List[pulumi.runtime.MockResourceArgs]:
        return [r for r in self.resources if r.typ == typ]

    def one(self, typ: str) -> pulumi.runtime.MockResourceArgs:
        matches = self.by_type(typ)
        assert len(matches) == 1, f"expected one {typ}, got {len(matches)}"
        return matches[0]


@pytest.fixture
def mocks() -> RecordingMocks:
    recorder = RecordingMocks()
    pulumi.runtime.set_mocks(recorder, project="remote-dev", stack="test", preview=False)
    return recorder


class StubConfig:
    """Stands in for pulumi.Config with a fixed set of values."""

    def __init__(self, values: Optional[Dict[str, str]] = None):
        self.values = values or {}

    def get(self, key: str) -> Optional[str]:
        return self.values.get(key)

    def get_int(self, key: str) -> Optional[int]:
        value = self.values.get(key)
        return int(value) if value is not None else None
