import json

from bson import json_util
from fastapi import Depends, FastAPI, HTTPException, status
from pydantic import BaseModel
from pymongo.errors import PyMongoError

from mongo_crud.connect_db import COLLECTION_NAME, DB_NAME, close, connect, select_collection, select_database
from mongo_crud.errors import DatabaseConnectionError, QueryError
from mongo_crud.fetcher import fetch_all


app = FastAPI(title="Mongo CRUD Read API", version="1.0.0")


def db_conn():
	"""Open a client per request and always close it afterwards."""
	try:
		client = connect()
	except DatabaseConnectionError as e:
		raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))
	try:
		yield select_database(client, DB_NAME)
	finally:
		close(client)


class HealthOut(BaseModel):
	status: str


def _format_document(doc: dict) -> dict:
	"""Turn a raw BSON document into plain JSON.

	The top-level _id becomes a string `id`; any other BSON value (nested
	ObjectId, Decimal128, Binary, ...) is rendered as relaxed extended JSON.
	"""
	out = dict(doc)
	if "_id" in out:
		out["id"] = str(out.pop("_id"))
	return json.loads(json_util.dumps(out))


@app.get("/documents", response_model=list[dict], tags=["Documents"])
def list_documents(db=Depends(db_conn)):
	try:
		docs = fetch_all(select_collection(db, COLLECTION_NAME))
	except QueryError as e:
		raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))
	return [_format_document(d) for d in docs]


@app.get("/health", response_model=HealthOut, tags=["Health"])
def health(db=Depends(db_conn)):
	try:
		db.client.admin.command("ping")
	except PyMongoError as e:
		raise HTTPException(status_code=500, detail=f"db ping failed: {e}")
	return HealthOut(status="ok")
