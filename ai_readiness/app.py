"""
AI Readiness Score – Streamlit frontend.
No business logic in layout; extraction and evaluation live in the pipeline modules.
"""

from typing import Optional

import streamlit as st

from config import AVAILABLE_ROLES, MIN_CV_CHARS, OPENAI_API_KEY
from evaluation.errors import EvaluationError
from evaluation.evaluator import prepare_request, run_evaluation
from schemas.evaluation import EvaluationResult
from utils.helpers import format_score, indicator_badges, role_label, score_label, score_tone
from utils.logger import get_logger

logger = get_logger(__name__)

INPUT_UPLOAD = "Upload CV"
INPUT_PASTE = "Paste Text"
# Pasted text must be longer than this before submit is enabled
MIN_PASTE_CHARS = 50


def _init_state() -> None:
    # Session state: selected role, validated result (until reset), last error
    for key, default in (("role", None), ("result", None), ("error", None)):
        if key not in st.session_state:
            st.session_state[key] = default


def _reset() -> None:
    st.session_state["result"] = None
    st.session_state["error"] = None
    st.session_state["role"] = None


def _submit(role: str, uploaded_file, pasted_text: str) -> None:
    """Run the pipeline and store the result or the error message in session state."""
    st.session_state["error"] = None
    try:
        if uploaded_file is not None:
            request = prepare_request(
                role,
                file_bytes=uploaded_file.getvalue(),
                filename=uploaded_file.name,
                content_type=uploaded_file.type,
            )
        else:
            request = prepare_request(role, text=pasted_text)
        st.session_state["result"] = run_evaluation(request)
    except EvaluationError as e:
        logger.warning("Evaluation failed: %s (debug=%s)", e.message, e.debug)
        st.session_state["error"] = e.message
    except Exception as e:
        logger.exception("Unexpected evaluation failure")
        st.session_state["error"] = f"Failed to evaluate CV. Please try again. ({e})"


def render_role_selection() -> Optional[str]:
    """Two role cards; returns the selected role key."""
    st.subheader("Select Candidate Role")
    st.caption("Choose the role the candidate is applying for")
    cols = st.columns(len(AVAILABLE_ROLES))
    for col, (key, role) in zip(cols, AVAILABLE_ROLES.items()):
        with col:
            selected = st.session_state["role"] == key
            with st.container(border=True):
                st.markdown(f"**{role['label']}**")
                st.caption(role["description"])
                if st.button(
                    "Selected" if selected else "Select",
                    key=f"role_{key}",
                    type="primary" if selected else "secondary",
                    use_container_width=True,
                ):
                    st.session_state["role"] = key
                    st.rerun()
    return st.session_state["role"]


def render_upload(role: str) -> None:
    """CV input (upload or paste) and submit button."""
    mode = st.radio("CV input", [INPUT_UPLOAD, INPUT_PASTE], horizontal=True, key="input_mode")
    uploaded_file = None
    pasted_text = ""
    if mode == INPUT_UPLOAD:
        uploaded_file = st.file_uploader(
            "Upload CV",
            type=["pdf", "docx", "txt"],
            key="cv_file",
            help="PDF, DOCX or TXT. PDF parsing is best-effort; use DOCX if it fails.",
        )
        if uploaded_file is not None:
            st.caption(f"{uploaded_file.name} · {uploaded_file.size / 1024:.1f} KB")
    else:
        pasted_text = st.text_area(
            "Paste CV text",
            height=300,
            key="cv_text",
            placeholder="Paste the full CV text here...",
        )
        st.caption(f"{len(pasted_text)} characters (minimum {MIN_CV_CHARS})")

    has_content = uploaded_file is not None or len(pasted_text.strip()) > MIN_PASTE_CHARS
    if st.button("Evaluate AI Readiness", type="primary", disabled=not has_content, key="submit_btn"):
        if not OPENAI_API_KEY:
            st.session_state["error"] = "OPENAI_API_KEY is not set. Add it to your .env file."
        else:
            with st.spinner(f"Evaluating CV for {role_label(role)}…"):
                _submit(role, uploaded_file, pasted_text)
            if st.session_state["result"] is not None:
                st.rerun()

    if st.session_state.get("error"):
        st.error(st.session_state["error"])


def render_result(result: EvaluationResult) -> None:
    """Score header, summary, parameter breakdown, notes, penalty and recommendations."""
    tone = score_tone(result.overall_score)
    getattr(st, tone)(f"### {format_score(result.overall_score)} / 100 · {score_label(result.overall_score)} AI Readiness")
    st.caption(f"{result.function_label} • {format_score(result.years_of_experience)} years experience")
    if result.risk_penalty_applied:
        st.markdown(":red[**⚠️ -20 Risk Penalty Applied**]")

    st.subheader("Evaluation Summary")
    st.markdown(result.summary)

    st.subheader("Score Breakdown")
    for param in result.parameters:
        with st.container(border=True):
            col_a, col_b = st.columns([3, 1])
            with col_a:
                st.markdown(f"**{param.name}**")
                st.caption(f"Weight: {format_score(param.weight)}%")
            with col_b:
                st.markdown(f"**{format_score(param.score)}**/100")
                st.caption(f"Weighted: {param.weighted_score:.1f}")
            st.progress(int(max(0, min(100, param.score))))
            st.caption(param.reasoning)
            pos_col, neg_col = st.columns(2)
            with pos_col:
                st.markdown(":green[**Positive Indicators**]")
                st.markdown(indicator_badges(param.positive_indicators) or "*None*")
            with neg_col:
                st.markdown(":red[**Areas for Improvement**]")
                st.markdown(indicator_badges(param.negative_indicators) or "*None*")

    if result.validation_notes:
        st.subheader("Context Validation")
        for note in result.validation_notes:
            st.markdown(f"- {note}")

    if result.risk_penalty_applied and result.risk_penalty_reason:
        st.subheader("Risk Penalty Details")
        st.warning(result.risk_penalty_reason)

    st.subheader("Recommendations to Improve")
    for i, rec in enumerate(result.recommendations, start=1):
        st.markdown(f"{i}. {rec}")

    st.divider()
    if st.button("Evaluate Another CV", key="reset_btn"):
        _reset()
        st.rerun()


def render_info_sections() -> None:
    """How it works + evaluation matrix (from the role catalogue)."""
    st.divider()
    st.subheader("How It Works")
    c1, c2, c3 = st.columns(3)
    with c1:
        st.markdown("**Context-Aware Analysis**")
        st.caption("Validates skills in work experience and projects, not just skills lists.")
    with c2:
        st.markdown("**Experience-Adapted Scoring**")
        st.caption("Different criteria for freshers vs experienced professionals.")
    with c3:
        st.markdown("**Anti-Gaming Protection**")
        st.caption("Detects keyword stuffing and penalizes stale, automatable skill sets.")

    st.subheader("Evaluation Matrix")
    cols = st.columns(len(AVAILABLE_ROLES))
    for col, role in zip(cols, AVAILABLE_ROLES.values()):
        with col:
            with st.container(border=True):
                st.markdown(f"**{role['matrix_title']}**")
                for param in role["parameters"]:
                    st.markdown(f"- **{param['name']} ({param['weight']}%)**  \n  {param['blurb']}")


def render_layout() -> None:
    """Streamlit page layout."""
    st.set_page_config(page_title="AI Readiness Score", layout="centered")
    _init_state()
    st.title("AI Readiness Score")

    result: Optional[EvaluationResult] = st.session_state.get("result")
    if result is not None:
        render_result(result)
        return

    st.markdown("### Measure AI Readiness, Not Just Task Proficiency")
    st.markdown(
        "*Score candidates on their ability to leverage AI tools for strategic outcomes, "
        "not just manual execution.*"
    )
    st.divider()

    role = render_role_selection()
    if not role:
        st.info("Please select a role above to continue")
    else:
        render_upload(role)

    render_info_sections()


if __name__ == "__main__":
    render_layout()
