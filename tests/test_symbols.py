from spoilersweeper.symbols import NUMBER_NAMES, CellTypes, is_spoiler, spoilerize, unspoiler


def test_spoilerize_forms():
    assert spoilerize('zero') == '|| :zero: ||'
    assert spoilerize('zero', spaces=False) == '||:zero:||'


def test_unspoiler_strips_two_chars_each_side():
    assert unspoiler(spoilerize('zero', spaces=False)) == ':zero:'
    assert unspoiler(spoilerize('zero', spaces=True)) == ' :zero: '
    assert unspoiler(spoilerize('zero', spaces=True)).strip() == ':zero:'


def test_is_spoiler():
    assert is_spoiler('||:boom:||')
    assert not is_spoiler(':boom:')
    assert not is_spoiler(' :boom: ')


def test_cell_types():
    types = CellTypes.build('bomb', spaces=False)
    assert types.mine == '||:bomb:||'
    assert len(types.numbers) == 9
    assert types.numbers[0] == '||:zero:||'
    assert types.numbers[8] == '||:eight:||'
    assert [unspoiler(n) for n in types.numbers] == [f':{n}:' for n in NUMBER_NAMES]
