# encoding: utf-8
'''This file contains private functions for the saxplist module.'''


# decoder contexts
EMPTY, TOP, FREE, DICT, ARRAY = range(5)


def update_struct(context, struct, key, value):
    '''
    Attach value to struct the way context says and return the struct. In a
    dict context value is stored under key, in an array context it is
    appended. In a free context value becomes the struct itself.
    '''
    if context == DICT:
        # a value with no key before it goes under the empty string
        struct['' if key is None else key] = value
    elif context == ARRAY:
        struct.append(value)
    elif context == FREE:
        struct = value
    return struct


def indent_lines(lines, indent):
    '''Return lines with indent put in front of each one.'''
    return [indent + line for line in lines]
