"""Tests for ordered rule application."""

from __future__ import annotations

import pytest

from frame_redact.rules import RuleSet

# ┌──────────────────────────────────────────────────────┬──────────────────────────────────────────────────────┬──────────────────────┐
# │ input                                                │ expected                                             │ description          │
# ├──────────────────────────────────────────────────────┼──────────────────────────────────────────────────────┼──────────────────────┤
# │ text containing sensitive literals                   │ text after the packaged rules                        │ test case name       │
# └──────────────────────────────────────────────────────┴──────────────────────────────────────────────────────┴──────────────────────┘
#
# fmt: off
PACKAGED_RULE_CASES = [
    ("ME-MngEnvMCAP706013-jagilber-1",             "contoso-subscription-001",               "subscription_prefixed"),
    ("sub: MngEnvMCAP706013-jagilber-1",           "sub: contoso-subscription-001",          "subscription"),
    ("admin@MngEnvMCAP706013.onmicrosoft.com",     "admin@contoso.com",                      "admin_email"),
    ("user@ME-MngEnvMCAP706013.onmicrosoft.com",   "user@contoso.onmicrosoft.com",           "tenant_domain_prefixed"),
    ("MngEnvMCAP706013.onmicrosoft.com",           "contoso.onmicrosoft.com",                "tenant_domain"),
    ("Directory: ME-MngEnvMCAP706013",             "Directory: contosotenant",               "tenant_prefixed"),
    ("mngenvmcap706013",                           "contosotenant",                          "tenant_lowercase"),
    ("d692f14b-8df6-4f72-ab7d-b4b2981a6b58",       "bc311a87-c50e-4def-8d86-97f45e508b58",   "tenant_guid"),
    ("D692F14B-8DF6-4F72-AB7D-B4B2981A6B58",       "bc311a87-c50e-4def-8d86-97f45e508b58",   "tenant_guid_uppercase"),
    ("d692f14b8df64f72ab7db4b2981a6b58",           "bc311a87c50e4def8d8697f45e508b58",       "tenant_guid_compact"),
    ("1310dfb0-a887-4ca0-8b9f-95690d4e9f8c",       "2aa10626-1ed0-401b-be45-b7df7a3fca10",   "subscription_guid"),
    ("1310dfb0a8874ca08b9f95690d4e9f8c",           "2aa106261ed0401bbe45b7df7a3fca10",       "subscription_guid_compact"),
    ('"d692f14b-8df6-4f72-ab7d-b4b2981a6b',        '"bc311a87-c50e-4def-8d86-97f45e508b',    "tenant_guid_truncated"),
    ("sflogsorsuvwbkd2h5a2",                       "sflogsservicefabriccluster",             "storage_logs"),
    ("wadorsuvwbkd2h5a3",                          "wadservicefabriccluster",                "storage_diagnostics"),
    ("sfjagilber-centralus",                       "servicefabriccluster-kv",                "key_vault"),
    ("sfjagilber1nt3so",                           "servicefabriccluster",                   "cluster"),
    ("CF5FA1BB54C5356FA853CAE416D7B950FCB7B7DF",   "A1B2C3D4E5F6789012345678901234567890ABCD", "cluster_thumbprint"),
    ("cf5fa1bb54c5356fa853cae416d7b950fcb7b7df",   "A1B2C3D4E5F6789012345678901234567890ABCD", "cluster_thumbprint_lower"),
    ("65E7734F5E95DD1AE965EE219EBB2C6B85F04BD0",   "1234567890ABCDEF1234567890ABCDEF12345678", "client_thumbprint"),
    ("Owner: jagilber",                            "Owner: cloudadmin",                      "username"),
    ("Nothing to see here",                        "Nothing to see here",                    "no_match"),
    ("",                                           "",                                       "empty"),
]
# fmt: on


class TestPackagedRules:
    """Tests for the packaged rules applied in order."""

    @pytest.mark.parametrize(
        ("text", "expected", "desc"),
        PACKAGED_RULE_CASES,
        ids=[c[2] for c in PACKAGED_RULE_CASES],
    )
    def test_replacement(self, rules: RuleSet, text: str, expected: str, desc: str) -> None:
        """Test each sensitive literal is replaced."""
        assert rules.apply(text) == expected, desc

    def test_specific_resource_beats_username(self, rules: RuleSet) -> None:
        """Test a resource name containing the username gets its own replacement."""
        text = "Cluster sfjagilber1nt3so in sfjagilber-centralus, owner jagilber"
        assert rules.apply(text) == "Cluster servicefabriccluster in servicefabriccluster-kv, owner cloudadmin"

    def test_all_occurrences_replaced(self, rules: RuleSet) -> None:
        """Test replacement is global, not first match only."""
        assert rules.apply("jagilber/JAGILBER/Jagilber") == "cloudadmin/cloudadmin/cloudadmin"

    def test_reapplying_is_a_no_op(self, rules: RuleSet) -> None:
        """Test replacement values are not matched again, including the guarded suffix."""
        text = rules.apply("d692f14b-8df6-4f72-ab7d-b4b2981a6b58 sfjagilber1nt3so admin@MngEnvMCAP706013.onmicrosoft.com")
        assert rules.apply(text) == text

    def test_guard_rule_only_touches_replacement(self, rules: RuleSet) -> None:
        """Test the suffix guard leaves unrelated '58' alone."""
        assert rules.apply("port 5858") == "port 5858"


class TestRuleOrder:
    """Tests for sequential application."""

    def test_each_rule_sees_previous_output(self) -> None:
        """Test rules chain rather than all matching the original string."""
        rules = RuleSet.from_pairs([("alpha", "beta"), ("beta", "gamma")])
        assert rules.apply("alpha") == "gamma"

    def test_reversed_order_changes_result(self) -> None:
        """Test a generic rule placed first shadows the specific one."""
        specific_first = RuleSet.from_pairs([("sfjagilber1nt3so", "servicefabriccluster"), ("jagilber", "cloudadmin")])
        generic_first = RuleSet.from_pairs([("jagilber", "cloudadmin"), ("sfjagilber1nt3so", "servicefabriccluster")])

        assert specific_first.apply("sfjagilber1nt3so") == "servicefabriccluster"
        assert generic_first.apply("sfjagilber1nt3so") == "sfcloudadmin1nt3so"

    def test_replacement_is_literal(self) -> None:
        """Test backslashes and group references in replacements are not expanded."""
        rules = RuleSet.from_pairs([("(a)", r"\1\g<0>\n")])
        assert rules.apply("a") == r"\1\g<0>\n"

    def test_empty_rule_set(self) -> None:
        """Test an empty rule set returns the input unchanged."""
        assert RuleSet().apply("jagilber") == "jagilber"
        assert len(RuleSet()) == 0
