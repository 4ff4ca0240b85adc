APP_NAME = "confstore"
ENV_PREFIX = "CONFSTORE_"
