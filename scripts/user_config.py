"""satpix user configuration.

This is the user-facing configuration file. Modify settings here to point
the pipelines at your data. Advanced settings are in
src/satpix/schemas/param.py

Usage:
    python scripts/run_pipelines.py scripts/user_config.py
    python scripts/run_pipelines.py scripts/user_config.py --only series
"""

CONFIG = {
    # ========================================================================
    # OUTPUT
    # ========================================================================
    "BASE_DIR": "./satpix_output",       # plots/ and logs/ go here
    "PIPELINES": ["scene", "series"],

    # ========================================================================
    # PIPELINE A: CHLOROPHYLL SCENE (netCDF)
    # ========================================================================
    "SCENE_PATH": "data/AQUA_MODIS.20240712T183001.L2.OC.nc",
    "CHL_VAR": "chlor_a",
    "LAT_VAR": "latitude",
    "LON_VAR": "longitude",
    # Level-2 granules keep variables in groups; use None for flat files
    "scene": {
        "variable_group": "geophysical_data",
        "coord_group": "navigation_data",
    },

    # ========================================================================
    # PIPELINE B: NDVI TIME SERIES (GeoTIFF stack)
    # ========================================================================
    "RASTER_DIR": "data/ndvi",
    "METADATA_CSV": "data/ndvi/metadata.csv",
    "DATE_COLUMN": "date",
    "FILENAME_DATE_FORMAT": "%Y%m%d",    # e.g. NDVI_20240117.tif
    # "FILE_COLUMN": "file",             # or: metadata column naming each raster
    # "POSITIONAL_JOIN": True,           # last resort: listing order == date order

    # ========================================================================
    # PLOTS
    # ========================================================================
    "USE_BASEMAP": True,                 # fetches web tiles
    "OUTPUT_FORMAT": "png",
}
