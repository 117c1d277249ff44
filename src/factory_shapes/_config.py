import os
from dotenv import load_dotenv

load_dotenv()

config = {
    "create-prefix": os.getenv("FACTORY_CREATE_PREFIX", "create"),
    "static-factory": os.getenv("FACTORY_STATIC_NAME", "factory"),
    "log-level": os.getenv("FACTORY_LOG_LEVEL", "WARNING"),
}
