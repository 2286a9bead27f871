from __future__ import annotations

from PIL import Image

import config
from conftest import FakeProvider, make_image_bytes, make_record
from illustration import DATA_URI_PREFIX, to_data_uri
from view_state import FetchState, Phase, WordViewController


def _recording_controller(provider):
    phases = []
    controller = WordViewController(provider, on_change=lambda state: phases.append(state.phase))
    return controller, phases


def test_initial_state_is_idle(provider):
    state = WordViewController(provider).state

    assert state == FetchState()
    assert state.phase is Phase.IDLE


def test_successful_cycle_goes_through_partially_loaded(provider):
    controller, phases = _recording_controller(provider)

    state = controller.fetch_random()

    assert phases == [Phase.LOADING, Phase.PARTIALLY_LOADED, Phase.READY]
    assert state.record.word == "tilfeldig"
    assert state.image_url.startswith(DATA_URI_PREFIX)
    assert state.error is None
    assert not state.is_loading_text
    assert not state.is_loading_image


def test_loading_flags_during_the_cycle(provider):
    snapshots = []
    controller = WordViewController(
        provider,
        on_change=lambda s: snapshots.append((s.phase, s.is_loading_text, s.is_loading_image, s.record is not None)),
    )

    controller.fetch_random()

    assert snapshots == [
        (Phase.LOADING, True, False, False),
        (Phase.PARTIALLY_LOADED, False, True, True),
        (Phase.READY, False, False, True),
    ]


def test_image_failure_keeps_the_page_usable():
    controller, phases = _recording_controller(FakeProvider(fail_image=True))

    state = controller.fetch_random()

    assert phases[-1] is Phase.READY
    assert state.record is not None
    assert state.image_url is None
    assert state.error is None
    assert not state.is_loading_image


def test_missing_image_part_keeps_the_page_usable():
    controller, _ = _recording_controller(FakeProvider(image=None))

    state = controller.fetch_random()

    assert state.phase is Phase.READY
    assert state.record is not None
    assert state.image_url is None


def test_text_failure_ends_in_error():
    provider = FakeProvider(fail_text=True)
    controller, phases = _recording_controller(provider)

    state = controller.fetch_random()

    assert phases == [Phase.LOADING, Phase.ERROR]
    assert state.record is None
    assert state.image_url is None
    assert state.error == config.GENERATION_ERROR_MESSAGE
    assert not state.is_loading_text
    assert not state.is_loading_image
    assert ("image", "tilfeldig") not in provider.calls


def test_unexpected_provider_exception_ends_in_error():
    class Broken(FakeProvider):
        def generate_random(self):
            raise ValueError("unexpected")

    state = WordViewController(Broken()).fetch_random()

    assert state.phase is Phase.ERROR
    assert state.error == config.GENERATION_ERROR_MESSAGE


def test_new_fetch_clears_previous_result_and_error(provider):
    controller = WordViewController(provider)
    controller.state.record = make_record("gammel")
    controller.state.image_url = DATA_URI_PREFIX + "AAAA"
    controller.state.error = "old error"
    seen = []
    controller.on_change = lambda s: seen.append((s.record, s.image_url, s.error))

    controller.fetch_random()

    assert seen[0] == (None, None, None)


def test_submit_search_issues_lookup_with_the_trimmed_word(provider):
    controller = WordViewController(provider)
    controller.set_query("  fjell  ")

    state = controller.submit_search()

    assert provider.calls[0] == ("word", "fjell")
    assert ("random",) not in provider.calls
    assert state.record.word == "fjell"
    assert state.query == "  fjell  "


def test_blank_search_is_a_no_op(provider):
    controller, phases = _recording_controller(provider)
    controller.set_query("   \t ")

    state = controller.submit_search()

    assert provider.calls == []
    assert phases == []
    assert state.phase is Phase.IDLE
    assert state.cycle == 0


def test_blank_search_leaves_a_shown_word_alone(provider):
    controller = WordViewController(provider)
    controller.fetch_random()
    before = (controller.state.record, controller.state.image_url, controller.state.cycle)
    controller.set_query("")

    controller.submit_search()

    assert (controller.state.record, controller.state.image_url, controller.state.cycle) == before


def test_refresh_path_is_the_same_from_idle_and_from_ready(provider):
    controller, phases = _recording_controller(provider)

    controller.refresh()
    from_idle = list(phases)
    phases.clear()
    controller.refresh()

    assert from_idle == phases == [Phase.LOADING, Phase.PARTIALLY_LOADED, Phase.READY]


def test_refresh_clears_the_search_box_and_fetches_random(provider):
    controller = WordViewController(provider)
    controller.set_query("fjell")

    state = controller.refresh()

    assert state.query == ""
    assert provider.calls[0] == ("random",)


def test_retry_repeats_the_last_query():
    provider = FakeProvider(fail_text=True)
    controller = WordViewController(provider)
    controller.set_query("fjell")
    controller.submit_search()

    provider.fail_text = False
    state = controller.retry()

    assert provider.calls == [("word", "fjell"), ("word", "fjell"), ("image", "fjell")]
    assert state.phase is Phase.READY
    assert state.error is None


def test_retry_after_random_fetch_is_random():
    provider = FakeProvider(fail_text=True)
    controller = WordViewController(provider)
    controller.fetch_random()

    provider.fail_text = False
    controller.retry()

    assert provider.calls[-2] == ("random",)


def test_result_from_a_stale_cycle_is_discarded():
    second_image = make_image_bytes(size=(8, 6))

    class Overlapping(FakeProvider):
        controller = None

        def generate_illustration(self, word, definition, etymology):
            self.calls.append(("image", word))
            if word == "første":
                # a newer search starts while this image is still pending
                self.controller.set_query("andre")
                self.controller.submit_search()
                return make_image_bytes()
            return second_image

    provider = Overlapping()
    controller = WordViewController(provider)
    provider.controller = controller
    controller.set_query("første")

    controller.submit_search()

    state = controller.state
    assert state.cycle == 2
    assert state.record.word == "andre"
    assert state.phase is Phase.READY
    assert state.image_url is not None
    assert state.image_url == to_data_uri(second_image)


def test_undecodable_image_still_ends_ready(monkeypatch):
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 5)
    controller, phases = _recording_controller(FakeProvider())

    state = controller.fetch_random()

    assert phases == [Phase.LOADING, Phase.PARTIALLY_LOADED, Phase.READY]
    assert state.record is not None
    assert state.image_url is None
    assert state.error is None
    assert not state.is_loading_image
