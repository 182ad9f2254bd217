import pytest

from legal_clinic.domain.entities import BlogPost, Identity, Session


def test_identity_from_camel_case():
    identity = Identity.model_validate(
        {"id": 3, "firstName": "jo", "lastName": "okello", "email": "jo@example.com", "role": "SUPER_ADMIN"}
    )
    assert identity.initials == "JO"
    assert identity.full_name == "jo okello"
    assert identity.role == "SUPER_ADMIN"


def test_identity_rejects_unknown_role():
    with pytest.raises(ValueError):
        Identity.model_validate({"id": 3, "email": "x@example.com", "role": "OWNER"})


def test_identity_serializes_with_aliases():
    identity = Identity(id=3, first_name="Jo", last_name="Okello", email="jo@example.com")
    dumped = identity.model_dump(by_alias=True)
    assert dumped["firstName"] == "Jo"
    assert dumped["role"] == "USER"


@pytest.mark.parametrize(
    "payload",
    [
        {"token": "t", "user": {"id": 1, "email": "a@b.c"}},
        {"accessToken": "t", "user": {"id": 1, "email": "a@b.c"}},
        {"token": "t", "type": "Bearer", "id": 1, "email": "a@b.c"},
    ],
)
def test_session_from_auth_payload_shapes(payload):
    session = Session.from_auth_payload(payload)
    assert session.token == "t"
    assert session.identity.email == "a@b.c"
    assert session.is_admin is False


@pytest.mark.parametrize("payload", [None, "token", {"user": {"id": 1, "email": "a@b.c"}}])
def test_session_from_bad_payload(payload):
    with pytest.raises(ValueError):
        Session.from_auth_payload(payload)


def test_blog_post_tolerates_nulls():
    post = BlogPost.model_validate(
        {"id": 1, "title": "T", "viewCount": None, "createdAt": "2026-01-10T09:30:00", "tags": None}
    )
    assert post.view_count is None
    assert post.tag_list == []
    assert post.created_at.year == 2026
