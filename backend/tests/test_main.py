class TestRoot:
    def test_liveness(self, client):
        r = client.get("/")
        assert r.status_code == 200
        assert r.text == "Hello from SoloSphere Server...."

    def test_cors_allows_dev_origin_with_credentials(self, client):
        r = client.get("/", headers={"Origin": "http://localhost:5173"})
        assert r.headers["access-control-allow-origin"] == "http://localhost:5173"
        assert r.headers["access-control-allow-credentials"] == "true"

    def test_cors_ignores_other_origins(self, client):
        r = client.get("/", headers={"Origin": "http://evil.example"})
        assert "access-control-allow-origin" not in r.headers
