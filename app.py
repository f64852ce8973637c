from __future__ import annotations

import json
import os

import streamlit as st

from config_loader import load_config
from grader_config import GraderConfig
from grading_serialization import grade_result_to_storage
from grading_session import GradingSession, GradingSessionError, simulate_latency
from mock_grader import GradeResult

CONFIG_ENV_VAR = "MOCK_GRADER_CONFIG"


@st.cache_resource(show_spinner=False)
def load_config_cached(path: str | None) -> GraderConfig:
    return load_config(path)


def _get_session(config: GraderConfig) -> GradingSession:
    session = st.session_state.get("grading_session")
    if session is None or session.config != config:
        session = GradingSession(config)
        st.session_state["grading_session"] = session
    return session


def _clear_inputs() -> None:
    st.session_state["title_input"] = ""
    st.session_state["submission_input"] = ""
    st.session_state["show_report"] = False
    session = st.session_state.get("grading_session")
    if session is not None:
        session.clear()


def _render_result(result: GradeResult, config: GraderConfig) -> None:
    st.subheader(result.title)
    st.metric("Score", f"{result.score}%")

    st.markdown("**Rubric**")
    for item in result.rubric:
        cols = st.columns([2, 3, 1])
        cols[0].markdown(f"**{item.aspect}**")
        cols[1].write(item.comment)
        cols[2].markdown(f"Points: **{item.points}**")

    st.markdown("**Insights**")
    insights = result.insights or (config.empty_insights_message,)
    st.markdown("\n".join(f"- {insight}" for insight in insights))


def _render_report(session: GradingSession, config: GraderConfig) -> None:
    try:
        report = session.export_report()
    except GradingSessionError as exc:
        st.info(str(exc))
        return

    st.caption(config.copy_failed_notice)
    st.code(report, language="text")
    st.download_button(
        "Download feedback",
        data=report,
        file_name="feedback.txt",
        mime="text/plain",
    )
    with st.expander("Stored result (JSON)"):
        record = session.last
        payload = grade_result_to_storage(record.result, record.submission)
        st.code(json.dumps(payload, indent=2), language="json")


def main() -> None:
    st.set_page_config(page_title="Mock AI Grader", layout="wide")
    st.title("Mock AI Grader")
    st.caption("Paste a submission and get deterministic rubric feedback.")

    config = load_config_cached(os.getenv(CONFIG_ENV_VAR) or None)
    session = _get_session(config)

    input_col, result_col = st.columns(2)

    with input_col:
        title = st.text_input("Title", key="title_input", placeholder=config.default_title)
        text = st.text_area("Submission", key="submission_input", height=320)

        button_cols = st.columns(2)
        run_clicked = button_cols[0].button(config.run_button_label, type="primary", key="run_button")
        button_cols[1].button("Clear", on_click=_clear_inputs, key="clear_button")

    with result_col:
        if run_clicked:
            try:
                session.grade(title, text)
            except GradingSessionError as exc:
                st.warning(str(exc))
            else:
                st.session_state["show_report"] = False
                with st.spinner(config.grading_label):
                    simulate_latency(config.grade_delay_seconds)

        action_cols = st.columns(2)
        if action_cols[0].button("Regrade", key="regrade_button"):
            try:
                session.regrade()
            except GradingSessionError as exc:
                st.info(str(exc))
            else:
                with st.spinner(config.regrading_label):
                    simulate_latency(config.regrade_delay_seconds)
        if action_cols[1].button("Copy feedback", key="copy_button"):
            st.session_state["show_report"] = True

        if session.last is None:
            st.info("Results will appear here after you run a grade.")
        else:
            _render_result(session.last.result, config)

        if st.session_state.get("show_report"):
            _render_report(session, config)


if __name__ == "__main__":
    main()
