from __future__ import annotations

from legalhub.ai.generator import GenerationError
from legalhub.ai.transliteration import TransliterationError
from tests.fakes import FakeGenerator, FakeTransliterator


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_home_lists_every_feature(client):
    response = client.get("/")

    assert response.status_code == 200
    for title in (
        "AI Legal Drafting",
        "Legal News &amp; Truth Filter",
        "Marathi Transliteration",
        "Legal Lingo Simplifier",
        "Markdown Editor &amp; Summarizer",
    ):
        assert title in response.text
    assert "/features/legal-drafting" in response.text


def test_unknown_feature_is_404(client):
    response = client.get("/features/divorce-planner")
    assert response.status_code == 404
    assert response.json()["detail"] == "Unknown feature: divorce-planner"


def test_markdown_editor_starts_with_rendered_sample(client):
    response = client.get("/features/markdown-editor")

    assert response.status_code == 200
    assert "Welcome to the Markdown Editor!" in response.text
    assert "<table>" in response.text


# ---------------------------------------------------------------------------
# Form pages
# ---------------------------------------------------------------------------

def test_drafting_post_shows_agreement(client, use_generator):
    use_generator(FakeGenerator({"rent_agreement": "THIS LEAVE AND LICENSE AGREEMENT"}))

    response = client.post(
        "/features/legal-drafting",
        data={
            "template": "Leave and license",
            "partyDetails": "Licensor: A. Rao. Licensee: V. Shah.",
            "clauses": "11 months, Rs. 20,000 per month",
        },
    )

    assert response.status_code == 200
    assert "THIS LEAVE AND LICENSE AGREEMENT" in response.text
    assert "Drafting Failed" not in response.text


def test_drafting_post_with_blank_field_shows_error_toast(client, use_generator):
    generator = use_generator(FakeGenerator())

    response = client.post(
        "/features/legal-drafting",
        data={"template": "Leave and license", "partyDetails": "  ", "clauses": "c"},
    )

    assert response.status_code == 200
    assert "Drafting Failed" in response.text
    assert "All text fields are required." in response.text
    assert generator.calls == 0


def test_verification_post_shows_verdict(client, use_generator):
    use_generator(
        FakeGenerator(
            {
                "is_verified": False,
                "explanation": "No such order was passed.",
                "relevant_sections": ["Section 8, Rent Control Act"],
            }
        )
    )

    response = client.post(
        "/features/fact-verification",
        data={"newsHeadline": "High Court bans all rent increases"},
    )

    assert "❌ Not Verified" in response.text
    assert "No such order was passed." in response.text
    assert "Section 8, Rent Control Act" in response.text


def test_verification_post_short_headline(client, use_generator):
    use_generator(FakeGenerator())

    response = client.post("/features/fact-verification", data={"newsHeadline": "short"})

    assert "Verification Failed" in response.text
    assert "News headline must be at least 10 characters long." in response.text


def test_markdown_post_shows_summary_and_preview(client, use_generator):
    use_generator(FakeGenerator({"summary": "A short note about leases."}))

    response = client.post(
        "/features/markdown-editor", data={"markdownText": "# Leases\n\nShort note."}
    )

    assert "A short note about leases." in response.text
    assert "<h1>Leases</h1>" in response.text


# ---------------------------------------------------------------------------
# JSON endpoints
# ---------------------------------------------------------------------------

def test_chat_endpoint_success(client, use_generator):
    use_generator(FakeGenerator({"reply": "Yes, a notarised agreement is advisable."}))

    response = client.post("/api/chat", json={"message": "Should I notarise it?"})

    assert response.json() == {
        "type": "success",
        "reply": "Yes, a notarised agreement is advisable.",
    }


def test_chat_endpoint_empty_message(client, use_generator):
    use_generator(FakeGenerator())

    response = client.post("/api/chat", json={"message": "   "})

    assert response.json() == {"type": "error", "message": "Message cannot be empty."}


def test_chat_endpoint_service_error(client, use_generator):
    use_generator(FakeGenerator(error=GenerationError("The AI service timed out. Please try again.")))

    response = client.post("/api/chat", json={"message": "Hello"})

    assert response.json() == {
        "type": "error",
        "message": "The AI service timed out. Please try again.",
    }


def test_news_endpoint(client, use_generator):
    use_generator(
        FakeGenerator(
            {
                "articles": [
                    {"headline": "New criminal laws take effect",
                     "summary": "Three new codes replaced the colonial-era laws.",
                     "category": "Legislation", "is_real": True},
                ]
            }
        )
    )

    body = client.get("/api/news").json()

    assert body["type"] == "success"
    assert body["articles"][0]["headline"] == "New criminal laws take effect"
    assert body["articles"][0]["is_real"] is True


def test_markdown_preview_endpoint(client):
    response = client.post("/api/markdown/preview", json={"markdown_text": "**bold**"})
    assert response.json() == {"html": "<p><strong>bold</strong></p>"}

    empty = client.post("/api/markdown/preview", json={"markdown_text": "  "})
    assert empty.json() == {"html": ""}


def test_transliterate_endpoint(client, use_transliterator):
    transliterator = use_transliterator(FakeTransliterator({"namaskar": "नमस्कार"}))

    response = client.post("/api/transliterate", json={"text": "namaskar"})

    assert response.json() == {"type": "success", "transliteration": "नमस्कार"}
    assert transliterator.seen == ["namaskar"]


def test_markdown_post_escapes_submitted_html(client, use_generator):
    use_generator(FakeGenerator({"summary": "A greeting."}))

    response = client.post(
        "/features/markdown-editor",
        data={"markdownText": "# Hi\n\n<script>alert(document.cookie)</script>"},
    )

    assert response.status_code == 200
    assert "<script>alert(document.cookie)</script>" not in response.text
    assert "<h1>Hi</h1>" in response.text


def test_markdown_preview_endpoint_escapes_html(client):
    body = client.post(
        "/api/markdown/preview", json={"markdown_text": "<img src=x onerror=alert(1)>"}
    ).json()

    assert "<img" not in body["html"]
    assert "&lt;img" in body["html"]


def test_simplifier_post_shows_plain_language(client, use_generator):
    generator = use_generator(
        FakeGenerator({"simplified_text": "The tenant must pay rent by the 5th."})
    )

    response = client.post(
        "/features/legal-simplifier",
        data={"legalText": "The lessee shall remit the rent on or before the fifth day."},
    )

    assert response.status_code == 200
    assert "Plain-Language Version" in response.text
    assert "The tenant must pay rent by the 5th." in response.text
    assert "remit the rent" in generator.prompts[0]


def test_transliterate_endpoint_error(client, use_transliterator):
    use_transliterator(
        FakeTransliterator(error=TransliterationError("Transliteration service returned HTTP 500."))
    )

    response = client.post("/api/transliterate", json={"text": "namaskar"})

    assert response.json() == {
        "type": "error",
        "message": "Transliteration service returned HTTP 500.",
    }


def test_app_script_drops_stale_responses(client):
    script = client.get("/static/app.js")

    assert script.status_code == 200
    # preview and transliteration both guard against out-of-order answers
    assert script.text.count("if (ticket !== latest) return;") >= 2
