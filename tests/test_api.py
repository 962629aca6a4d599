import cv2
import numpy as np
from fastapi.testclient import TestClient
from app import app

client = TestClient(app)


def test_health():
    assert client.get('/health').json() == {"status": "ok"}


def test_lbp_endpoint(tmp_path):
    path = tmp_path / 'tex.png'
    img = np.random.default_rng(6).integers(0, 256, size=(24, 24)).astype(np.uint8)
    cv2.imwrite(str(path), img)
    resp = client.post('/descriptors/lbp', json={'image_path': str(path)})
    assert resp.status_code == 200
    body = resp.json()
    assert body['mode'] == 'lbp'
    assert body['shape'] == [18, 18]
    assert sum(body['histograms']['S']) == 18 * 18


def test_mrelbp_on_flat_image_is_unprocessable(tmp_path):
    path = tmp_path / 'flat.png'
    cv2.imwrite(str(path), np.full((30, 30), 128, dtype=np.uint8))
    resp = client.post('/descriptors/mrelbp', json={'image_path': str(path)})
    assert resp.status_code == 422
    assert "Standard deviation" in resp.json()['detail']


def test_missing_image_404():
    resp = client.post('/descriptors/mrelbp', json={'image_path': 'does/not/exist.png'})
    assert resp.status_code == 404
