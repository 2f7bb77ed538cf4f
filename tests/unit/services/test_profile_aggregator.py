"""Unit tests for profile field building and merging."""

from uuid import UUID

from domain.entities.profile import Profile
from domain.services.profile_aggregator import (
    ProfileInput,
    apply_profile_fields,
    build_profile_fields,
    new_profile,
    split_skills,
)


class TestSplitSkills:
    def test_trims_each_skill(self):
        assert split_skills(" python, go ,rust ") == ["python", "go", "rust"]

    def test_drops_empty_tokens(self):
        assert split_skills("python,, ,go,") == ["python", "go"]

    def test_single_skill(self):
        assert split_skills("python") == ["python"]


class TestBuildProfileFields:
    def test_keeps_only_non_empty_fields(self):
        fields = build_profile_fields(
            ProfileInput(status="Developer", skills="python", company="", bio=None)
        )

        assert fields == {"status": "Developer", "skills": ["python"]}

    def test_groups_social_links(self):
        fields = build_profile_fields(
            ProfileInput(twitter="https://twitter.com/jane", youtube="")
        )

        assert fields == {"social": {"twitter": "https://twitter.com/jane"}}

    def test_omits_social_when_no_links(self):
        fields = build_profile_fields(ProfileInput(status="Developer"))

        assert "social" not in fields

    def test_skills_of_only_separators_are_omitted(self):
        assert "skills" not in build_profile_fields(ProfileInput(skills=" , ,"))

    def test_empty_input_gives_empty_fields(self):
        assert build_profile_fields(ProfileInput()) == {}


class TestApplyProfileFields:
    def test_absent_fields_keep_stored_values(self, user_id: UUID):
        profile = Profile(user_id=user_id, status="Developer", company="Acme", bio="Hi")

        apply_profile_fields(profile, build_profile_fields(ProfileInput(status="Senior")))

        assert profile.status == "Senior"
        assert profile.company == "Acme"
        assert profile.bio == "Hi"

    def test_blank_fields_do_not_clear_stored_values(self, user_id: UUID):
        profile = Profile(user_id=user_id, status="Developer", company="Acme")

        apply_profile_fields(
            profile, build_profile_fields(ProfileInput(status="Developer", company=""))
        )

        assert profile.company == "Acme"

    def test_social_links_merge_per_network(self, user_id: UUID):
        profile = Profile(
            user_id=user_id,
            social={"twitter": "https://twitter.com/old", "youtube": "https://youtube.com/me"},
        )

        apply_profile_fields(
            profile, build_profile_fields(ProfileInput(twitter="https://twitter.com/new"))
        )

        assert profile.social == {
            "twitter": "https://twitter.com/new",
            "youtube": "https://youtube.com/me",
        }

    def test_skills_are_replaced_not_merged(self, user_id: UUID):
        profile = Profile(user_id=user_id, skills=["python", "go"])

        apply_profile_fields(profile, build_profile_fields(ProfileInput(skills="rust")))

        assert profile.skills == ["rust"]

    def test_sub_lists_are_untouched(self, user_id: UUID):
        profile = Profile(user_id=user_id)
        profile.experience = []

        apply_profile_fields(profile, {"status": "Developer"})

        assert profile.experience == []
        assert profile.education == []


class TestNewProfile:
    def test_holds_exactly_the_supplied_fields(self, user_id: UUID):
        profile = new_profile(user_id, {"status": "Developer", "skills": ["python"]})

        assert profile.user_id == user_id
        assert profile.status == "Developer"
        assert profile.skills == ["python"]
        assert profile.company is None
        assert profile.social == {}
