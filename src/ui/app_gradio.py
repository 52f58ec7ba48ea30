"""Gradio web interface for complaint analysis"""
from __future__ import annotations

import json
from typing import List, Optional

import gradio as gr
from pydantic import TypeAdapter, ValidationError

from config import logger
from src.analysis import get_analysis_pipeline
from src.core import AppError, ComplaintSummary, InvalidInputError

_COMPLAINT_LIST = TypeAdapter(List[ComplaintSummary])

def parse_previous_complaints(raw: Optional[str]) -> List[ComplaintSummary]:
    """
    Parse the prior-complaints textbox

    Args:
        raw: JSON list of objects with id, text, department, status and
            createdAt; blank means no prior complaints

    Returns:
        List of ComplaintSummary

    Raises:
        InvalidInputError: If the JSON is malformed or an item is incomplete
    """
    if raw is None or not raw.strip():
        return []
    try:
        return _COMPLAINT_LIST.validate_python(json.loads(raw))
    except (json.JSONDecodeError, ValidationError) as e:
        raise InvalidInputError(
            message="Previous complaints must be a JSON list of {id, text, department, status, createdAt}"
        ) from e

def analyze_ui(text: str, previous: Optional[str] = None) -> dict:
    """
    Gradio handler for analysis requests

    Args:
        text: Complaint text input from UI
        previous: Optional JSON list of prior complaints

    Returns:
        Dictionary containing either:
            - AnalysisResult fields on success
            - Error dictionary with 'error' key on failure
    """
    logger.info("Received request")
    try:
        corpus = parse_previous_complaints(previous)
        result = get_analysis_pipeline().analyze(text or "", corpus)
        return result.model_dump(mode="json")
    except AppError as e:
        logger.warning(f"AppError: {e}")
        return e.to_dict()

demo = gr.Interface(
    fn=analyze_ui,
    inputs=[
        gr.Textbox(label="Complaint", lines=4),
        gr.Textbox(label="Previous complaints (JSON, optional)", lines=4),
    ],
    outputs=gr.JSON(label="Analysis result"),
    title="Grievance Analyzer",
    description="Enter a complaint in English, Hindi or Tamil to see its department, urgency and similar complaints"
)

if __name__ == "__main__":
    demo.launch()
