"""Ordskatt: a single page that shows one Norwegian word at a time.

Run with:
    streamlit run src/app.py
"""

import html
import logging

import streamlit as st

import config
from etymology import format_etymology
from view_state import FetchState, Phase, WordViewController
from word_generator import OpenAIWordGenerator

logger = logging.getLogger(__name__)

PAGE_CSS = """
<style>
.ordskatt-badge {display:inline-block;padding:0.2rem 0.8rem;border-radius:999px;font-size:0.75rem;
  background:#ecfdf5;color:#047857;border:1px solid #d1fae5;text-transform:uppercase;letter-spacing:0.05em;}
.ordskatt-word {font-family:serif;font-size:5rem;font-weight:700;line-height:1;margin:1rem 0;color:#1c1917;}
.ordskatt-definition {font-size:1.4rem;color:#57534e;font-weight:300;}
.ordskatt-heading {font-size:0.8rem;font-weight:700;text-transform:uppercase;letter-spacing:0.1em;color:#a8a29e;}
.ordskatt-etymology {font-family:serif;font-size:1.1rem;line-height:2;color:#292524;}
.ordskatt-item {margin-left:0.5rem;padding-left:1rem;border-left:2px solid #d1fae5;}
.ordskatt-item::before {content:"● ";color:#047857;font-size:0.5rem;vertical-align:middle;}
.ordskatt-chip {display:inline-block;margin:0 0.4rem 0.4rem 0;padding:0.3rem 1rem;background:#fff;
  border:1px solid #e7e5e4;border-radius:0.5rem;font-size:0.9rem;color:#57534e;}
.ordskatt-example {font-family:serif;font-style:italic;font-size:1.1rem;}
.ordskatt-funfact {background:#fffbeb;padding:1.2rem;border-radius:1rem;border:1px solid #fef3c7;color:#78350f;}
.ordskatt-image img {width:100%;border-radius:1rem;}
.ordskatt-placeholder {display:flex;align-items:center;justify-content:center;aspect-ratio:4/5;
  background:#f5f5f4;border-radius:1rem;color:#d6d3d1;font-size:2.5rem;}
.ordskatt-skeleton {background:#e2e8f0;border-radius:0.5rem;margin-bottom:1rem;}
</style>
"""


def get_controller() -> WordViewController:
    """One controller per browser session."""
    if "controller" not in st.session_state:
        st.session_state.controller = WordViewController(OpenAIWordGenerator())
    return st.session_state.controller


def _set_pending(action: str) -> None:
    st.session_state.pending_action = action


def _on_refresh() -> None:
    # Refresh always means a new random word
    st.session_state.query = ""
    _set_pending("random")


def render_header(state: FetchState) -> None:
    logo, search, refresh = st.columns([2, 6, 2])
    with logo:
        st.markdown("### 🌲 Ordskatt")
    with search:
        with st.form("search", border=False):
            st.text_input("Søk", key="query", placeholder="Søk etter et ord...", label_visibility="collapsed")
            st.form_submit_button("Søk", on_click=_set_pending, args=("search",))
    with refresh:
        st.button("↻ Nytt tilfeldig ord", on_click=_on_refresh, disabled=state.is_loading_text)


def render_loading() -> None:
    text, image = st.columns(2)
    with text:
        for width, height in (("75%", "4rem"), ("25%", "1.5rem"), ("100%", "1rem"), ("83%", "1rem"), ("66%", "1rem")):
            st.markdown(f'<div class="ordskatt-skeleton" style="width:{width};height:{height}"></div>',
                        unsafe_allow_html=True)
    with image:
        st.markdown('<div class="ordskatt-skeleton" style="aspect-ratio:4/3"></div>', unsafe_allow_html=True)


def render_etymology(text: str) -> None:
    parts = []
    for block in format_etymology(text):
        if block.is_list_item:
            parts.append(f'<div class="ordskatt-item">{html.escape(block.text)}</div>')
        else:
            parts.append(f'<p>{html.escape(block.text)}</p>')
    st.markdown(f'<div class="ordskatt-etymology">{"".join(parts)}</div>', unsafe_allow_html=True)


def render_inflections(inflections) -> None:
    if not inflections:
        return
    st.markdown('<div class="ordskatt-heading">Bøyning &amp; Former</div>', unsafe_allow_html=True)
    chips = "".join(f'<span class="ordskatt-chip">{html.escape(form)}</span>' for form in inflections)
    st.markdown(chips, unsafe_allow_html=True)


def render_image(state: FetchState) -> None:
    record = state.record
    if state.is_loading_image and not state.image_url:
        st.markdown('<div class="ordskatt-placeholder"></div>', unsafe_allow_html=True)
        st.caption("Skisserer...")
    elif state.image_url:
        alt = html.escape(f"Illustrasjon av ordet {record.word}", quote=True)
        st.markdown(f'<div class="ordskatt-image"><img src="{state.image_url}" alt="{alt}"></div>',
                    unsafe_allow_html=True)
        st.caption("AI-tolkning")
    else:
        st.markdown('<div class="ordskatt-placeholder">?</div>', unsafe_allow_html=True)


def render_record(state: FetchState) -> None:
    record = state.record
    text, image = st.columns([7, 5], gap="large")
    with text:
        st.markdown(f'<span class="ordskatt-badge">{html.escape(record.word_class)}</span>', unsafe_allow_html=True)
        st.markdown(f'<div class="ordskatt-word">{html.escape(record.word)}</div>', unsafe_allow_html=True)
        st.markdown(f'<p class="ordskatt-definition">{html.escape(record.definition)}</p>', unsafe_allow_html=True)
        st.divider()

        st.markdown('<div class="ordskatt-heading">Opprinnelse</div>', unsafe_allow_html=True)
        render_etymology(record.etymology)

        render_inflections(record.inflections)

        example, fun_fact = st.columns(2)
        with example:
            st.markdown('<div class="ordskatt-heading">Eksempel</div>', unsafe_allow_html=True)
            st.markdown(f'<p class="ordskatt-example">"{html.escape(record.usage_example)}"</p>',
                        unsafe_allow_html=True)
        if record.fun_fact:
            with fun_fact:
                st.markdown('<div class="ordskatt-heading">💡 Visste du?</div>', unsafe_allow_html=True)
                st.markdown(f'<div class="ordskatt-funfact">{html.escape(record.fun_fact)}</div>',
                            unsafe_allow_html=True)
    with image:
        render_image(state)


def render_body(placeholder, state: FetchState, interactive: bool = True) -> None:
    """Draw the page body for `state` into `placeholder`.

    Intermediate renders during a fetch pass interactive=False so the retry
    button is only created once per script run.
    """
    with placeholder.container():
        if state.error:
            st.error(state.error)
            if interactive:
                st.button("Prøv på nytt", on_click=_set_pending, args=("retry",))
        if state.phase is Phase.LOADING:
            render_loading()
        elif state.record is not None:
            render_record(state)


def main() -> None:
    st.set_page_config(page_title="Ordskatt", page_icon="🌲", layout="wide")
    st.markdown(PAGE_CSS, unsafe_allow_html=True)

    controller = get_controller()
    render_header(controller.state)
    body = st.empty()

    action = st.session_state.pop("pending_action", None)
    if action is None and controller.state.phase is Phase.IDLE:
        action = "random"

    if action is not None:
        controller.on_change = lambda state: render_body(body, state, interactive=False)
        try:
            if action == "search":
                controller.set_query(st.session_state.get("query", ""))
                controller.submit_search()
            elif action == "retry":
                controller.retry()
            else:
                controller.refresh()
        finally:
            controller.on_change = None

    render_body(body, controller.state)


config.setup_logging()
main()
