APP_NAME = "storagemap"
