import logging
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from drill.evaluator import evaluate
from drill.exercises import EXERCISES, get_exercise
from drill.formatting import to_display_form
from drill.models import Attempt, Exercise
from drill.oracle import are_equivalent, is_factored_form, is_zero
from drill.validator import delete_step, submit_step

logger = logging.getLogger(__name__)

app = FastAPI(title="Algebra Drill API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class SubmitRequest(BaseModel):
    attempt: Attempt
    text: str


class DeleteRequest(BaseModel):
    attempt: Attempt
    index: int


class EvaluateRequest(BaseModel):
    text: str
    x: float


class EvaluateResponse(BaseModel):
    value: Optional[float]


class CheckRequest(BaseModel):
    text: str
    reference: str


class CheckResponse(BaseModel):
    equivalent: bool
    is_zero: bool
    factored: bool
    display: str


def _lookup(exercise_id: str) -> Exercise:
    try:
        return get_exercise(exercise_id)
    except KeyError:
        logger.info("Unknown exercise requested: %s", exercise_id)
        raise HTTPException(status_code=404, detail=f"Unknown exercise '{exercise_id}'.")


def _trusted(attempt: Attempt) -> Attempt:
    # Origin and target always come from the catalogue, never the client.
    return attempt.model_copy(update={"exercise": _lookup(attempt.exercise.id)})


@app.get("/api/exercises", response_model=list[Exercise])
def list_exercises():
    return list(EXERCISES)


@app.get("/api/exercises/{exercise_id}", response_model=Exercise)
def read_exercise(exercise_id: str):
    return _lookup(exercise_id)


@app.post("/api/exercises/{exercise_id}/attempts", response_model=Attempt)
def start_attempt(exercise_id: str):
    return Attempt.start(_lookup(exercise_id))


@app.post("/api/attempts/steps", response_model=Attempt)
def add_step(req: SubmitRequest):
    return submit_step(_trusted(req.attempt), req.text)


@app.post("/api/attempts/steps/delete", response_model=Attempt)
def remove_step(req: DeleteRequest):
    try:
        return delete_step(_trusted(req.attempt), req.index)
    except IndexError as e:
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/api/evaluate", response_model=EvaluateResponse)
def evaluate_text(req: EvaluateRequest):
    return EvaluateResponse(value=evaluate(req.text, req.x))


@app.post("/api/check", response_model=CheckResponse)
def check_text(req: CheckRequest):
    if not req.text.strip():
        raise HTTPException(status_code=400, detail="Expression cannot be empty.")
    return CheckResponse(
        equivalent=are_equivalent(req.reference, req.text),
        is_zero=is_zero(req.text),
        factored=is_factored_form(req.text),
        display=to_display_form(req.text),
    )
