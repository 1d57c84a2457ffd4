"""
Tests for the profile data models and seed record.
"""
import pytest
from pydantic import ValidationError

from portfolio.models import ContactInfo, ProfileData, Provider, SkillLevel, SocialLink
from portfolio.seed import INITIAL_PROFILE, initial_profile


def test_skill_levels_are_ordered():
    ranks = [level.rank for level in SkillLevel]
    assert ranks == [1, 2, 3, 4]
    assert SkillLevel.EXPERT.rank > SkillLevel.ADVANCED.rank > SkillLevel.INTERMEDIATE.rank > SkillLevel.BEGINNER.rank


def test_seed_profile_parses():
    profile = initial_profile()
    assert profile.id == "julio-cesar-fonseca"
    assert profile.name == "Julio Cesar Fonseca"
    assert [s.name for s in profile.skills][:2] == ["Python & R", "Power BI & Tableau"]
    assert [p.id for p in profile.projects] == ["p1", "p2", "p3"]
    assert profile.testimonials[0].author == "María González"
    assert [link.provider for link in profile.contact.links] == [Provider.LINKEDIN, Provider.EMAIL, Provider.WHATSAPP]
    assert profile.updated_at.tzinfo is not None


def test_seed_gets_fresh_timestamp_each_time():
    first = initial_profile()
    second = initial_profile()
    assert second.updated_at >= first.updated_at


def test_unknown_provider_rejected():
    with pytest.raises(ValidationError):
        SocialLink(provider="myspace", url="https://myspace.com/me")


def test_unknown_skill_level_rejected():
    data = dict(INITIAL_PROFILE, skills=[{"name": "Python", "level": "guru"}])
    with pytest.raises(ValidationError):
        ProfileData(**data)


def test_phone_is_optional():
    contact = ContactInfo(email="me@example.com")
    assert contact.phone is None
    assert contact.links == []
