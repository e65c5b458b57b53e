import uuid

import pytest

from community_directory.core.identity import PROFILE_NAMESPACE, profile_id_for


class TestProfileId:
    def test_deterministic(self):
        assert profile_id_for("user_2abc") == profile_id_for("user_2abc")

    def test_distinct_users_get_distinct_ids(self):
        assert profile_id_for("user_2abc") != profile_id_for("user_2abd")

    def test_is_version_4_rfc4122(self):
        value = uuid.UUID(profile_id_for("user_2abc"))

        assert value.version == 4
        assert value.variant == uuid.RFC_4122

    def test_matches_name_based_hash(self):
        """Same SHA-1 bits as uuid5 over the DNS namespace, only the version nibble differs."""
        derived = profile_id_for("user_2abc")
        name_based = str(uuid.uuid5(PROFILE_NAMESPACE, "user_2abc"))

        assert PROFILE_NAMESPACE == uuid.NAMESPACE_DNS
        assert derived[:14] == name_based[:14]
        assert derived[14] == "4"
        assert derived[15:] == name_based[15:]

    def test_empty_id_rejected(self):
        with pytest.raises(ValueError):
            profile_id_for("")
