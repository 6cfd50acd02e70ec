"""Test the summary and report endpoints over HTTP."""

import json

from reqbot.services.llm_gateway import ProviderResponseError

MODEL_JSON = json.dumps(
    {
        "Functional Requirements": ["User login", "Product search", "Checkout"],
        "Non-Functional Requirements": ["Mobile friendly"],
        "Stakeholders": [{"name": "Alice", "role": "Owner"}],
        "Risks & Challenges": [],
        "User Stories": ["As a buyer, I want to track my order"],
        "Timeline": "3-4 months",
        "Cost Estimate": "$50,000 - $80,000",
        "Constraints": [],
    }
)


def _store_turns(client, project_id: int) -> None:
    for role, content in (
        ("user", "An online store for sneakers"),
        ("bot", "Who are your customers?"),
        ("user", "Young adults, mostly on mobile"),
    ):
        response = client.post(
            "/chat", json={"projectId": project_id, "role": role, "content": content}
        )
        assert response.status_code == 201


class TestGenerateSummary:
    """Test cases for POST /generate-summary."""

    def test_commits_summary_and_closes_interview(self, client, project, providers) -> None:
        _store_turns(client, project.id)
        providers[0].reply = MODEL_JSON

        response = client.post("/generate-summary", json={"projectId": project.id})

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["functional"] == ["User login", "Product search", "Checkout"]
        assert data["nonFunctional"] == ["Mobile friendly"]
        assert data["stakeholders"] == ["Alice (Owner)"]
        assert data["costEstimate"] == "$50,000 - $80,000"

        assert client.get("/chat", params={"projectId": project.id}).json()["data"] == []
        stored = client.get(f"/projects/{project.id}").json()["data"]
        assert stored["interview_status"] == "summarized"
        assert stored["summary"]["userStories"] == ["As a buyer, I want to track my order"]

    def test_summarized_interview_rejects_turns_until_reopened(
        self, client, project, providers
    ) -> None:
        _store_turns(client, project.id)
        providers[0].reply = MODEL_JSON
        client.post("/generate-summary", json={"projectId": project.id})

        rejected = client.post(
            "/chat", json={"projectId": project.id, "role": "user", "content": "one more"}
        )
        assert rejected.status_code == 409

        reopened = client.post(f"/projects/{project.id}/reopen")
        assert reopened.json()["data"]["interview_status"] == "open"
        accepted = client.post(
            "/chat", json={"projectId": project.id, "role": "user", "content": "one more"}
        )
        assert accepted.status_code == 201

    def test_supplied_history_is_used(self, client, project, providers) -> None:
        providers[0].reply = MODEL_JSON

        response = client.post(
            "/generate-summary",
            json={
                "projectId": project.id,
                "conversationHistory": [{"role": "user", "parts": [{"text": "A CRM"}]}],
            },
        )

        assert response.status_code == 200
        assert "User: A CRM" in providers[0].calls[0]["messages"][0].text

    def test_empty_transcript_is_400(self, client, project, providers) -> None:
        response = client.post("/generate-summary", json={"projectId": project.id})

        assert response.status_code == 400
        assert response.json()["error"] == "No conversation history found for this project"
        assert providers[0].calls == []

    def test_unknown_project_is_404(self, client) -> None:
        response = client.post("/generate-summary", json={"projectId": 12345})

        assert response.status_code == 404

    def test_both_providers_failing_keeps_transcript(self, client, project, providers) -> None:
        _store_turns(client, project.id)
        providers[0].error = ProviderResponseError("gemini", "HTTP 503")
        providers[1].error = ProviderResponseError("openai", "HTTP 503")

        response = client.post("/generate-summary", json={"projectId": project.id})

        assert response.status_code == 502
        assert response.json()["success"] is False
        assert len(client.get("/chat", params={"projectId": project.id}).json()["data"]) == 3
        stored = client.get(f"/projects/{project.id}").json()["data"]
        assert stored["interview_status"] == "open"
        assert stored["summary"] is None

    def test_project_id_must_be_positive(self, client) -> None:
        response = client.post("/generate-summary", json={"projectId": 0})

        assert response.status_code == 400


class TestGenerateReport:
    """Test cases for POST /generate-report."""

    def test_returns_pdf_attachment(self, client) -> None:
        response = client.post(
            "/generate-report",
            json={
                "extractedData": {
                    "functional": ["User login", "Checkout"],
                    "nonFunctional": ["Mobile friendly"],
                    "stakeholders": ["Alice (Owner)"],
                },
                "clientName": "Alice",
                "clientEmail": "alice@example.com",
                "projectName": "Sneaker Store",
            },
        )

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/pdf"
        assert response.headers["content-disposition"].startswith(
            'attachment; filename="SRS_Report_'
        )
        assert response.content.startswith(b"%PDF")

    def test_missing_extracted_data_is_400(self, client) -> None:
        response = client.post("/generate-report", json={"clientName": "Alice"})

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "extractedData is required"}
