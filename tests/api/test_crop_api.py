"""
Integration tests for the crop API
"""

import numpy as np


class TestCropAPI:
    """Tests for POST /api/crop"""

    def test_crop_exact(self, client, scene_files, output_dir, read_png, scene):
        """Test a crop run with default settings"""
        response = client.post(
            "/api/crop", json={"input_paths": [str(p) for p in scene_files]}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["bounding_box"]["empty"] is False
        assert len(data["outputs"]) == 3
        assert data["outputs"][0]["role"] == "background"
        assert data["outputs"][1]["role"] == "comparison"

        written = read_png(output_dir / "first.png")
        np.testing.assert_array_equal(written[1:3, 2:4], scene[1][1:3, 2:4])

    def test_crop_custom_names(self, client, scene_files, output_dir):
        """Test custom naming through the API"""
        response = client.post(
            "/api/crop",
            json={
                "input_paths": [str(p) for p in scene_files],
                "crop_mode": "rectangle",
                "bg_name": {"name_type": "custom", "name": "bg"},
                "file_name": {"name_type": "custom", "name": "shot"},
            },
        )

        assert response.status_code == 200
        assert sorted(p.name for p in output_dir.iterdir()) == ["bg.png", "shot1.png", "shot2.png"]

    def test_crop_resize(self, client, scene_files):
        """Test that resized comparison outputs report cropped sizes"""
        response = client.post(
            "/api/crop",
            json={
                "input_paths": [str(p) for p in scene_files],
                "crop_mode": "rectangle",
                "resize_output": True,
            },
        )

        assert response.status_code == 200
        outputs = response.json()["outputs"]
        assert (outputs[0]["width"], outputs[0]["height"]) == (10, 8)
        assert (outputs[1]["width"], outputs[1]["height"]) == (4, 4)

    def test_single_image(self, client, scene_files):
        """Test that one image gives a 400 InputError"""
        response = client.post("/api/crop", json={"input_paths": [str(scene_files[0])]})

        assert response.status_code == 400
        data = response.json()
        assert data["type"] == "InputError"
        assert "At minimum two images" in data["error"]

    def test_missing_file(self, client, scene_files, tmp_path):
        """Test that a missing input gives 404"""
        response = client.post(
            "/api/crop",
            json={"input_paths": [str(scene_files[0]), str(tmp_path / "missing.png")]},
        )

        assert response.status_code == 404

    def test_illegal_custom_name(self, client, scene_files):
        """Test that illegal custom names are rejected"""
        response = client.post(
            "/api/crop",
            json={
                "input_paths": [str(p) for p in scene_files],
                "bg_name": {"name_type": "custom", "name": "CON"},
            },
        )

        assert response.status_code == 400
        assert response.json()["type"] == "ConfigurationError"

    def test_leniency_out_of_range(self, client, scene_files):
        """Test request validation of leniency"""
        response = client.post(
            "/api/crop",
            json={"input_paths": [str(p) for p in scene_files], "leniency": 100},
        )

        assert response.status_code == 422
        assert response.json()["type"] == "ValidationError"

    def test_unknown_field(self, client, scene_files):
        """Test that unknown request fields are rejected"""
        response = client.post(
            "/api/crop",
            json={"input_paths": [str(p) for p in scene_files], "sharpen": True},
        )

        assert response.status_code == 422


class TestFilenameAPI:
    """Tests for POST /api/filename/check"""

    def test_legal(self, client):
        """Test a legal name"""
        response = client.post("/api/filename/check", json={"name": "shot 1"})

        assert response.status_code == 200
        assert response.json() == {"name": "shot 1", "illegal": False}

    def test_illegal(self, client):
        """Test an illegal name"""
        response = client.post("/api/filename/check", json={"name": "shot*1"})

        assert response.status_code == 200
        assert response.json()["illegal"] is True
