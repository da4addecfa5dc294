import unittest

from fastapi.testclient import TestClient

from app.main import app


class TestMain(unittest.TestCase):
    def test_app_metadata(self):
        self.assertEqual(app.title, "Dashboard Gateway")
        paths = app.openapi()["paths"]
        for path in ("/api/weather", "/api/currency", "/api/quote", "/api/health"):
            self.assertIn(path, paths)

    def test_cors_allows_browser_clients(self):
        client = TestClient(app)
        resp = client.get("/api/health", headers={"Origin": "http://localhost:5173"})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.headers.get("access-control-allow-origin"), "*")

    def test_unknown_route_404(self):
        client = TestClient(app)
        self.assertEqual(client.get("/api/nope").status_code, 404)


if __name__ == "__main__":
    unittest.main()
