from datetime import datetime

from careerforge.models import CoverLetter
from tests.conftest import auth_headers_for, make_user

JOB = {"job_title": "Data Engineer", "company_name": "Acme", "job_description": "Build pipelines in Python."}


def test_create_without_ai_stores_template_letter(client, auth_headers, db):
    resp = client.post("/api/cover-letters", headers=auth_headers, json=JOB)

    assert resp.status_code == 201
    body = resp.json()
    assert body["status"] == "completed"
    assert body["company_name"] == "Acme"
    assert "Data Engineer position at Acme" in body["content"]
    assert "5 year(s) of experience in Tech" in body["content"]
    assert db.query(CoverLetter).count() == 1


def test_create_with_ai_uses_reply_and_profile_prompt(client, auth_headers, fake_ai):
    fake_ai.replies.append("Dear Acme team,\n\nI build pipelines.")

    body = client.post("/api/cover-letters", headers=auth_headers, json=JOB).json()

    assert body["content"] == "Dear Acme team,\n\nI build pipelines."
    prompt = fake_ai.prompts[0]
    assert "Data Engineer position at Acme" in prompt
    assert "- Skills: Python, SQL" in prompt
    assert "Build pipelines in Python." in prompt


def test_ai_failure_still_saves_template(client, auth_headers, fake_ai):
    fake_ai.replies.append(RuntimeError("503 from provider"))

    resp = client.post("/api/cover-letters", headers=auth_headers, json=JOB)

    assert resp.status_code == 201
    assert resp.json()["content"].startswith("Dear Hiring Manager,")


def test_list_is_newest_first_and_owner_scoped(client, auth_headers, db, user):
    other = make_user(db, external_id="other")
    db.add_all([
        CoverLetter(user_id=user.id, content="old", company_name="A", job_title="X", status="completed",
                    created_at=datetime(2026, 1, 1), updated_at=datetime(2026, 1, 1)),
        CoverLetter(user_id=user.id, content="new", company_name="B", job_title="Y", status="completed",
                    created_at=datetime(2026, 2, 1), updated_at=datetime(2026, 2, 1)),
        CoverLetter(user_id=other.id, content="theirs", company_name="C", job_title="Z", status="completed"),
    ])
    db.commit()

    body = client.get("/api/cover-letters", headers=auth_headers).json()
    assert [c["content"] for c in body] == ["new", "old"]


def test_get_and_delete_are_owner_scoped(client, auth_headers, db):
    make_user(db, external_id="other")
    other_headers = auth_headers_for("other")
    letter_id = client.post("/api/cover-letters", headers=auth_headers, json=JOB).json()["id"]

    assert client.get(f"/api/cover-letters/{letter_id}", headers=other_headers).status_code == 404
    assert client.delete(f"/api/cover-letters/{letter_id}", headers=other_headers).status_code == 404

    assert client.get(f"/api/cover-letters/{letter_id}", headers=auth_headers).status_code == 200
    resp = client.delete(f"/api/cover-letters/{letter_id}", headers=auth_headers)
    assert resp.json() == {"id": letter_id, "status": "deleted"}
    assert client.get(f"/api/cover-letters/{letter_id}", headers=auth_headers).status_code == 404
