import os
CONFIG = {
    "LOCALTIME_PATH": os.getenv("DATEZ_LOCALTIME", "/etc/localtime"),
    "LOG_LEVEL": os.getenv("DATEZ_LOG_LEVEL", "WARNING").upper(),
}
