"""
Tests for the contact and message listing endpoints
"""
from helpers import submit


def test_submit_contact_creates_message_and_user(client, notifier):
    response = submit(client, "Ana", "Hi", "a@x.com", "Hello")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Message sent successfully"
    assert body["data"]["user"] == {"email": "a@x.com", "name": "Ana"}
    assert body["data"]["message"]["content"] == "Hello"
    assert body["data"]["message"]["subject"] == "Hi"
    assert body["data"]["message"]["userEmail"] == "a@x.com"


def test_submit_contact_broadcasts_once_with_response_data(client, notifier):
    response = submit(client, "Ana", "Hi", "a@x.com", "Hello")

    assert notifier.events == [("new-message", response.json()["data"])]


def test_resubmission_updates_user_and_adds_message(client, notifier):
    submit(client, "Ana", "Hi", "a@x.com", "Hello")
    response = submit(client, "Ana2", "Hi2", "a@x.com", "Hello2")

    assert response.status_code == 200
    assert response.json()["data"]["user"]["name"] == "Ana2"

    messages = client.get("/api/messages").json()["data"]
    assert [m["content"] for m in messages] == ["Hello2", "Hello"]
    # both messages point at the one user row, which now carries the latest name
    assert {m["user"]["name"] for m in messages} == {"Ana2"}
    assert len(notifier.events) == 2


def test_list_messages_empty(client):
    response = client.get("/api/messages")

    assert response.status_code == 200
    assert response.json() == {"success": True, "data": []}


def test_list_messages_newest_first(client):
    for i in range(3):
        submit(client, "Ana", f"Subject {i}", f"user{i}@x.com", f"Body {i}")

    messages = client.get("/api/messages").json()["data"]

    assert [m["subject"] for m in messages] == ["Subject 2", "Subject 1", "Subject 0"]
    created = [m["createdAt"] for m in messages]
    assert created == sorted(created, reverse=True)
    assert messages[0]["user"] == {"email": "user2@x.com", "name": "Ana"}


def test_submit_contact_accepts_form_body(client, notifier):
    response = client.post(
        "/api/contact",
        data={"name": "Ana", "subject": "Hi", "email": "a@x.com", "message": "Hello"},
    )

    assert response.status_code == 200
    assert response.json()["data"]["user"]["email"] == "a@x.com"
    assert len(notifier.events) == 1


def test_submit_contact_without_email_is_rejected(client, notifier):
    response = client.post(
        "/api/contact",
        json={"name": "Ana", "subject": "Hi", "message": "Hello"},
    )

    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "Invalid request payload"}
    assert notifier.events == []
    assert client.get("/api/messages").json()["data"] == []


def test_submit_contact_with_blank_email_is_rejected(client, notifier):
    response = submit(client, "Ana", "Hi", "   ", "Hello")

    assert response.status_code == 400
    assert notifier.events == []


def test_submit_contact_with_malformed_json_is_rejected(client, notifier):
    response = client.post(
        "/api/contact",
        content=b"{not json",
        headers={"content-type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json()["success"] is False
    assert notifier.events == []


def test_store_outage_returns_generic_errors(down_client, notifier):
    response = submit(down_client, "Ana", "Hi", "a@x.com", "Hello")

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Internal server error"}
    assert notifier.events == []

    response = down_client.get("/api/messages")

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Internal server error"}


def test_cors_echoes_origin_with_credentials(client):
    response = client.options(
        "/api/contact",
        headers={
            "Origin": "https://anywhere.example",
            "Access-Control-Request-Method": "POST",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "https://anywhere.example"
    assert response.headers["access-control-allow-credentials"] == "true"

    response = client.get("/api/messages", headers={"Origin": "https://anywhere.example"})

    assert response.headers["access-control-allow-origin"] == "https://anywhere.example"


def test_submit_contact_with_malformed_multipart_is_rejected(client, notifier):
    response = client.post(
        "/api/contact",
        content=b"garbage",
        headers={"content-type": "multipart/form-data; boundary=xyz"},
    )

    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "Invalid request payload"}
    assert notifier.events == []


def test_submit_contact_form_content_type_is_case_insensitive(client, notifier):
    response = client.post(
        "/api/contact",
        content=b"name=Ana&subject=Hi&email=a%40x.com&message=Hello",
        headers={"content-type": "Application/X-WWW-Form-Urlencoded"},
    )

    assert response.status_code == 200
    assert response.json()["data"]["user"] == {"email": "a@x.com", "name": "Ana"}
    assert len(notifier.events) == 1


def test_submit_contact_stores_long_name_and_subject(client, notifier):
    long_name = "n" * 300
    long_subject = "s" * 300

    response = submit(client, long_name, long_subject, "a@x.com", "Hello")

    assert response.status_code == 200
    assert response.json()["data"]["user"]["name"] == long_name
    assert response.json()["data"]["message"]["subject"] == long_subject
