import pytest


@pytest.fixture
def pipeline_config(make_config, scene_path, series_inputs, temp_dir):
    """Config pointing both pipelines at the synthetic inputs."""
    raster_dir, metadata = series_inputs
    return make_config(
        BASE_DIR=str(temp_dir / "output"),
        SCENE_PATH=str(scene_path),
        RASTER_DIR=str(raster_dir),
        METADATA_CSV=str(metadata),
        FILENAME_DATE_FORMAT="%Y%m%d",
    )
