import os


class Config:
    PROJECT_ROOT = os.environ.get("COMPDOCS_ROOT", os.getcwd())
    # Relative to PROJECT_ROOT
    DATA_DIR = os.environ.get("COMPDOCS_DATA_DIR", "src/data/components")
    BUILD_DATA_DIR = os.environ.get("COMPDOCS_BUILD_DATA_DIR", "build/data/components")
    INDEX_FILE = "index.json"
    LOG_LEVEL = os.environ.get("COMPDOCS_LOG_LEVEL", "INFO")
    HOST = os.environ.get("COMPDOCS_HOST", "127.0.0.1")
    PORT = int(os.environ.get("COMPDOCS_PORT", "5000"))
