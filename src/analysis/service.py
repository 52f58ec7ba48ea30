"""Grievance submission workflow on top of the analysis pipeline"""
from __future__ import annotations

from typing import Optional, Sequence

from pydantic import ValidationError

from config import logger
from src.core import (
    AnalysisFailedError,
    AnalysisResult,
    ComplaintSummary,
    InvalidInputError,
    InvalidStatusTransitionError,
    PermissionDeniedError,
    Urgency,
)
from src.core.grievance import (
    ADMIN_ROLES,
    USER_ROLES,
    Comment,
    GrievanceRecord,
    GrievanceStatus,
    GrievanceSubmission,
    StatusUpdate,
    can_transition,
    generate_tracking_id,
)
from src.core.ports.analysis import IAnalysisPipeline
from src.analysis.lexicon import department_info
from src.analysis.sentiment import keyword_urgency


class GrievanceService:
    """
    Turns citizen submissions into grievance records and moves them through
    the status workflow

    Records are never mutated: every operation returns an updated copy for
    the storage layer to persist.

    Attributes:
        pipeline: Analysis pipeline run on each description
        urgency_model: 'score' to copy the sentiment urgency, 'keyword' to
            use the urgent-keyword model
        block_on_analysis_error: Refuse submissions whose analysis failed
        tracking_id_prefix: Prefix of generated tracking IDs
    """
    def __init__(
        self,
        pipeline: IAnalysisPipeline,
        urgency_model: str = "score",
        block_on_analysis_error: bool = False,
        tracking_id_prefix: str = "GR",
    ) -> None:
        if urgency_model not in ("score", "keyword"):
            raise InvalidInputError(message=f"Unknown urgency model: {urgency_model}")
        self.pipeline = pipeline
        self.urgency_model = urgency_model
        self.block_on_analysis_error = block_on_analysis_error
        self.tracking_id_prefix = tracking_id_prefix

    def submit(
        self,
        submission: GrievanceSubmission | dict,
        user_id: str,
        existing_complaints: Optional[Sequence[ComplaintSummary]] = None,
    ) -> GrievanceRecord:
        """
        Analyze a submission and build its grievance record

        Args:
            submission: Form fields, as a model or a plain dict
            user_id: Authenticated submitter
            existing_complaints: Prior complaints to check for duplicates

        Returns:
            New GrievanceRecord in 'pending' status

        Raises:
            InvalidInputError: If the form fields are missing or blank
            AnalysisFailedError: If the analysis failed and
                block_on_analysis_error is set
        """
        if isinstance(submission, dict):
            try:
                submission = GrievanceSubmission.model_validate(submission)
            except ValidationError as e:
                raise InvalidInputError(
                    message="Subject and description are required",
                    fields=[".".join(map(str, err["loc"])) for err in e.errors()],
                ) from e

        logger.info(f"Submitting grievance for user {user_id}")
        analysis = self.pipeline.analyze(submission.description, existing_complaints)

        if analysis.degraded and self.block_on_analysis_error:
            raise AnalysisFailedError(detail=analysis.failure_summary())

        return self._build_record(submission, user_id, analysis)

    def urgency_for(self, analysis: AnalysisResult, description: str) -> Urgency:
        """Urgency copied into the record, according to the configured model"""
        if self.urgency_model == "keyword":
            text = analysis.translation.translated_text if analysis.translation else description
            return keyword_urgency(text).urgency
        return analysis.sentiment.urgency

    def update_status(
        self,
        record: GrievanceRecord,
        status: GrievanceStatus | str,
        updated_by: str,
        role: str,
        comments: Optional[str] = None,
    ) -> GrievanceRecord:
        """
        Move a grievance to a new status

        Raises:
            PermissionDeniedError: If role is not an admin role
            InvalidStatusTransitionError: If the workflow does not allow the change
        """
        if role not in ADMIN_ROLES:
            raise PermissionDeniedError(message="Only administrators can update grievance status")

        try:
            new_status = GrievanceStatus(status)
        except ValueError as e:
            raise InvalidInputError(message=f"Unknown status: {status}") from e

        if not can_transition(record.status, new_status):
            raise InvalidStatusTransitionError(
                message=f"Cannot move grievance from {record.status.value} to {new_status.value}",
                tracking_id=record.tracking_id,
            )

        update = StatusUpdate(
            status=new_status,
            updated_by=updated_by,
            updated_by_role=role,
            comments=comments,
        )
        logger.info(f"Grievance {record.tracking_id}: {record.status.value} -> {new_status.value}")
        return record.model_copy(
            update={
                "status": new_status,
                "status_history": [*record.status_history, update],
                "updated_at": update.updated_at,
            }
        )

    def add_comment(self, record: GrievanceRecord, user_id: str, role: str, text: str) -> GrievanceRecord:
        """
        Append a comment from the grievance owner or an administrator

        Raises:
            PermissionDeniedError: If the user neither owns the grievance nor is an admin
            InvalidInputError: If the comment is blank
        """
        if role not in USER_ROLES:
            raise InvalidInputError(message=f"Unknown role: {role}")
        if record.user_id != user_id and role not in ADMIN_ROLES:
            raise PermissionDeniedError(message="Not authorized to comment on this grievance")
        if not text or not text.strip():
            raise InvalidInputError(message="Comment text is required")

        comment = Comment(user_id=user_id, user_role=role, text=text)
        return record.model_copy(update={"comments": [*record.comments, comment]})

    def _build_record(
        self,
        submission: GrievanceSubmission,
        user_id: str,
        analysis: AnalysisResult,
    ) -> GrievanceRecord:
        classification = analysis.classification
        info = department_info(classification.department)

        return GrievanceRecord(
            tracking_id=generate_tracking_id(self.tracking_id_prefix),
            user_id=user_id,
            **submission.model_dump(),
            original_language=analysis.language_detection.detected_language,
            translated_description=analysis.translation.translated_text if analysis.translation else None,
            department=classification.department,
            department_code=info.code,
            department_name=info.name,
            tags=list(classification.tags),
            sentiment_score=analysis.sentiment.score,
            urgency=self.urgency_for(analysis, submission.description),
            confidence_score=classification.confidence,
            similar_grievances=[c.id for c in analysis.similarity.similar_complaints],
            analysis_error=analysis.failure_summary(),
            status=GrievanceStatus.PENDING,
        )
