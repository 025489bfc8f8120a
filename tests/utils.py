DOC_ID = "642f238625b383fba5ca34f0"

MONGO_ENV = {
    "MONGO_USER": "u",
    "MONGO_PASSWORD": "p",
    "MONGO_HOST": "localhost",
    "MONGO_PORT": "27017",
    "MONGO_DATABASE": "db",
    "MONGO_COLLECTION": "coll",
}
