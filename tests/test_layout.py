import pytest

from tickbar import BarWidget, LineLayout, Stats, TimeEstimator, TimeWidget


def _stats(current, total, **kwargs):
    return Stats(current=current, total=total, digit_width=len(str(total)), **kwargs)


def test_fixed_width_without_time():
    layout = LineLayout()
    # '[job]:' + ' 50%' + '||' + ' 5/10'
    assert layout.fixed_width(_stats(5, 10, description='[job]'), show_time=False) == 6 + 4 + 2 + 6


def test_time_width_grows_with_velocity_digits():
    widget = TimeWidget()
    assert widget.width(_stats(1, 10, velocity=5.0)) == 24
    assert widget.width(_stats(1, 10, velocity=512.25)) == 26


def test_time_width_grows_with_hours():
    widget = TimeWidget()
    stats = _stats(1, 10, elapsed=36000.0, remaining=3600, velocity=1.0)
    assert widget.render(stats) == ' [10:00:00<1:00:00, 1.00it/s]'
    assert widget.width(stats) == 24 + 3 + 2


def test_compose_fills_exact_columns():
    layout = LineLayout()
    line = layout.compose(_stats(3, 10, velocity=1.5), columns=70, show_time=True)
    assert not line.degraded
    assert line.show_time
    assert len(line.text) == 70
    assert line.bar_width == 70 - layout.fixed_width(_stats(3, 10, velocity=1.5), show_time=True)


def test_compose_degrades_when_too_narrow():
    layout = LineLayout()
    stats = _stats(1, 10)
    line = layout.compose(stats, columns=20, show_time=True)
    assert line.degraded
    assert not line.show_time
    assert line.bar_width == LineLayout.MIN_BAR_WIDTH
    assert line.columns == LineLayout.MIN_BAR_WIDTH + layout.base_width(stats)
    assert len(line.text) == line.columns


@pytest.mark.parametrize('current, filled', [(0, 0), (1, 3), (2, 5), (3, 8), (4, 10)])
def test_bar_fill_rounding(current, filled):
    widget = BarWidget()
    rendered = widget.render(_stats(current, 4), 10)
    assert rendered == '|' + '█' * filled + ' ' * (10 - filled) + '|'


def test_percentage_rounds_half_up():
    layout = LineLayout()
    assert layout.percentage_widget.render(_stats(1, 8)) == ' 13%'
    assert layout.percentage_widget.render(_stats(8, 8)) == '100%'


def test_custom_glyphs():
    layout = LineLayout(BarWidget(char_start_bracket='[', char_end_bracket=']', char_complete='#', char_incomplete='.'))
    line = layout.compose(_stats(1, 2), columns=20, show_time=False)
    assert line.text == ' 50%[#####.....] 1/2'


def test_glyphs_must_be_single_characters():
    with pytest.raises(ValueError):
        BarWidget(char_complete='##')


def test_time_estimator():
    now = [10.0]
    estimator = TimeEstimator(clock=lambda: now[0])

    first = estimator.sample(0, 100)
    assert (first.elapsed, first.remaining, first.velocity) == (0.0, 0, 0.0)
    assert estimator.epoch == 10.0

    now[0] = 14.0
    estimate = estimator.sample(20, 100)
    assert estimate.elapsed == 4.0
    assert estimate.velocity == 5.0
    assert estimate.remaining == 16

    now[0] = 15.0
    assert estimator.sample(0, 100).remaining == 0

    estimator.reset()
    assert estimator.epoch is None
