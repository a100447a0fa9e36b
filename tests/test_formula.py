from gridboost import Formula, FormulaResolutionError, WILDCARD


COLUMNS = ['a', 'b', 'y', 'c']


def _assert_rejected(formula, columns=COLUMNS):

    try:
        formula.resolve(columns)
    except FormulaResolutionError:
        return

    raise AssertionError(f'Expected FormulaResolutionError for {formula}')


def test_wildcard_resolves_to_all_other_columns():

    target, predictors = Formula('y').resolve(COLUMNS)

    assert target == 'y'
    assert predictors == ['a', 'b', 'c']
    assert Formula('y').resolve(COLUMNS) == (target, predictors)


def test_explicit_predictors_keep_order():

    assert Formula('y', ['c', 'a']).resolve(COLUMNS) == ('y', ['c', 'a'])


def test_target_among_predictors_is_rejected():

    _assert_rejected(Formula('y', ['a', 'y']))


def test_unresolvable_formulas():

    _assert_rejected(Formula('missing'))
    _assert_rejected(Formula('y', ['a', 'zzz']))
    _assert_rejected(Formula('y', ['a', 'a']))
    _assert_rejected(Formula('y'), columns=['y'])


def test_parse():

    wildcard = Formula.parse('malignant ~ .')
    explicit = Formula.parse(' y ~ a + b ')

    assert wildcard.target == 'malignant'
    assert wildcard.predictors is WILDCARD
    assert explicit == Formula('y', ('a', 'b'))
    assert str(explicit) == 'y ~ a + b'
    assert str(wildcard) == 'malignant ~ .'

    for text in ['y', '~ a', 'y ~ a +', 'y ~ a ~ b']:
        try:
            Formula.parse(text)
        except FormulaResolutionError:
            continue
        raise AssertionError(f'Expected FormulaResolutionError for {text!r}')
