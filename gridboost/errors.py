class GridboostError(ValueError):

    '''Base class for data and formula errors raised by gridboost.'''


class MissingColumnError(GridboostError):

    '''Expected column is not present in the data.'''


class TypeConversionError(GridboostError):

    '''Column value cannot be parsed as a number.'''


class FormulaResolutionError(GridboostError):

    '''Formula cannot be resolved against the columns of the data.'''
