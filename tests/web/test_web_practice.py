"""Tests for lesson practice endpoints."""


class TestIpQuiz:
    """Tests for GET /api/practice/ip-quiz."""

    def test_ip_quiz(self, client):
        """Four questions with explanations."""
        data = client.get("/api/practice/ip-quiz").json()
        assert len(data) == 4
        assert data[1]["options"][data[1]["correctAnswer"]] == "255.255.0.0"
        assert "DHCP" in data[3]["explanation"]


class TestConversionDrills:
    """Tests for the conversion drill endpoints."""

    def test_list_drills(self, client):
        """Six drills in four directions."""
        data = client.get("/api/practice/conversions").json()
        assert len(data) == 6
        assert {d["type"] for d in data} == {"bin-to-dec", "dec-to-bin", "hex-to-dec", "dec-to-hex"}

    def test_check_correct(self, client):
        """Correct answer is confirmed."""
        response = client.post(
            "/api/practice/conversions/check",
            json={"question": "100", "type": "dec-to-hex", "answer": "64"},
        )
        assert response.status_code == 200
        assert response.json() == {"isCorrect": True, "correctAnswer": "64"}

    def test_check_wrong(self, client):
        """Wrong answers get the expected value."""
        data = client.post(
            "/api/practice/conversions/check",
            json={"question": "FF", "type": "hex-to-dec", "answer": "256"},
        ).json()
        assert data["isCorrect"] is False
        assert data["correctAnswer"] == "255"

    def test_check_malformed_question(self, client):
        """Question not valid in its base."""
        response = client.post(
            "/api/practice/conversions/check",
            json={"question": "12", "type": "bin-to-dec", "answer": "3"},
        )
        assert response.status_code == 400

    def test_check_unknown_type(self, client):
        """Unknown direction uses the drill message."""
        response = client.post(
            "/api/practice/conversions/check",
            json={"question": "12", "type": "oct-to-dec", "answer": "10"},
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid drill answer"
