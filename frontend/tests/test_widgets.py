import io

from PIL import Image
from streamlit.testing.v1 import AppTest

from showcase_ui.core.constants import SUMMARY_FALLBACK
from showcase_ui.core.lifecycle import Phase
from showcase_ui.core.provider import ProviderUnavailable
from showcase_ui.core.state import IMAGE_TASK, SENTIMENT_TASK, SUMMARY_TASK

LONG_TEXT = "Artificial intelligence lets machines learn from data. " * 10


# Each app function runs as its own script, so imports live inside it.
def image_app():
    import streamlit as st

    from showcase_ui.core.state import IMAGE_TASK, get_task, init_state
    from showcase_ui.ui.widgets import image_classifier

    # AppTest cannot drive a file uploader; serve the file from session state
    st.file_uploader = lambda *args, **kwargs: st.session_state.get("upload")
    init_state(st.session_state.get("fake_provider"))
    image_classifier.render(get_task(IMAGE_TASK))


def sentiment_app():
    import streamlit as st

    from showcase_ui.core.state import SENTIMENT_TASK, get_task, init_state
    from showcase_ui.ui.widgets import sentiment

    init_state(st.session_state.get("fake_provider"))
    sentiment.render(get_task(SENTIMENT_TASK))


def summarizer_app():
    import streamlit as st

    from showcase_ui.core.state import SUMMARY_TASK, get_task, init_state
    from showcase_ui.ui.widgets import summarizer

    init_state(st.session_state.get("fake_provider"))
    summarizer.render(get_task(SUMMARY_TASK))


class Upload:
    def __init__(self, name, type_, content, file_id):
        self.name = name
        self.type = type_
        self.size = len(content)
        self.file_id = file_id
        self._content = content

    def getvalue(self):
        return self._content


def _png():
    buf = io.BytesIO()
    Image.new("RGB", (4, 3), (255, 0, 0)).save(buf, format="PNG")
    return buf.getvalue()


def _app(script, provider):
    at = AppTest.from_function(script, default_timeout=30)
    at.session_state["fake_provider"] = provider
    return at


def _markdown(at):
    return " ".join(m.value for m in at.markdown)


def test_image_widget_ignores_non_image(provider):
    at = _app(image_app, provider)
    at.session_state["upload"] = Upload("notes.txt", "text/plain", b"hello", "f1")
    at.run()

    assert not at.exception
    assert provider.calls == []
    assert at.session_state[IMAGE_TASK].artifact is None
    assert "Predictions" not in _markdown(at)


def test_image_widget_classifies_once_per_upload(provider):
    at = _app(image_app, provider)
    at.session_state["upload"] = Upload("cat.png", "image/png", _png(), "f2")
    at.run()

    assert not at.exception
    assert provider.calls == [("image", "cat.png")]
    assert at.session_state[IMAGE_TASK].phase is Phase.SUCCESS
    assert "Predictions" in _markdown(at)

    # same file on the next rerun: no second request
    at.run()
    assert len(provider.calls) == 1


def test_image_widget_resets_when_upload_cleared(provider):
    at = _app(image_app, provider)
    at.session_state["upload"] = Upload("cat.png", "image/png", _png(), "f3")
    at.run()
    at.session_state["upload"] = None
    at.run()

    task = at.session_state[IMAGE_TASK]
    assert task.artifact is None
    assert task.phase is Phase.IDLE
    assert "Predictions" not in _markdown(at)


def test_sentiment_edit_clears_result(provider):
    at = _app(sentiment_app, provider)
    at.run()
    assert at.button(key="sent-run").disabled

    at.text_area(key="sent-text").input("I absolutely love this new AI technology!").run()
    at.button(key="sent-run").click().run()

    assert not at.exception
    assert at.session_state[SENTIMENT_TASK].phase is Phase.SUCCESS
    assert "**Positive**" in _markdown(at)

    at.text_area(key="sent-text").input("Something else entirely").run()
    assert at.session_state[SENTIMENT_TASK].result is None
    assert "**Positive**" not in _markdown(at)
    assert len(provider.calls) == 1


def test_summarizer_needs_fifty_chars(provider):
    at = _app(summarizer_app, provider)
    at.run()
    at.text_area(key="sum-text").input("x" * 49).run()
    assert at.button(key="sum-run").disabled

    at.text_area(key="sum-text").input("x" * 50).run()
    assert not at.button(key="sum-run").disabled


def test_summarizer_edit_clears_summary(provider):
    at = _app(summarizer_app, provider)
    at.run()
    at.text_area(key="sum-text").input(LONG_TEXT).run()
    at.button(key="sum-run").click().run()

    assert not at.exception
    assert "#### Summary" in _markdown(at)
    assert "Short summary." in _markdown(at)

    at.text_area(key="sum-text").input(LONG_TEXT + " More.").run()
    assert "#### Summary" not in _markdown(at)
    assert at.session_state[SUMMARY_TASK].result is None


def test_summarizer_failure_shows_fallback(provider):
    provider.error = ProviderUnavailable("down")
    at = _app(summarizer_app, provider)
    at.run()
    at.text_area(key="sum-text").input(LONG_TEXT).run()
    at.button(key="sum-run").click().run()

    assert [e.value for e in at.error] == [SUMMARY_FALLBACK]
    assert at.session_state[SUMMARY_TASK].phase is Phase.FAILURE
    assert not at.button(key="sum-run").disabled
