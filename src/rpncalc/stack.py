STACK_MAX = 1024
DISPLAY_SLOTS = 8


class OperandStack:
    '''
    Fixed capacity stack of floats.

    Never grows past its capacity. Failed operations report it through their
    return value and leave the stack untouched.
    '''

    def __init__(self, capacity=STACK_MAX):
        '''
        Create empty stack.

        :param capacity: Most values the stack will ever hold.
        '''
        if capacity < 1:
            raise ValueError('Stack capacity must be positive, not {}'
                             .format(capacity))
        self.capacity = capacity
        self._data = [0.0] * capacity
        self.size = 0

    def __len__(self):
        return self.size

    def __iter__(self):
        '''
        Iterate over values, bottom of the stack first.
        '''
        return iter(self._data[:self.size])

    def __repr__(self):
        return '{}({!r}, capacity={})'.format(type(self).__name__,
                                              list(self),
                                              self.capacity)

    def isempty(self):
        return self.size == 0

    def isfull(self):
        return self.size >= self.capacity

    def push(self, number):
        '''
        Push number as new top. Return False if full.
        '''
        if self.isfull():
            return False
        self._data[self.size] = number
        self.size += 1
        return True

    def extend(self, numbers):
        '''
        Push all numbers, leftmost at the bottom, or none of them.
        '''
        numbers = list(numbers)
        if self.size + len(numbers) > self.capacity:
            return False
        for number in numbers:
            self.push(number)
        return True

    def pop(self):
        '''
        Remove and return top of the stack, or None if empty.
        '''
        if self.isempty():
            return None
        self.size -= 1
        return self._data[self.size]

    def popmany(self, n):
        '''
        Pop n values, topmost first, or None (popping nothing) if fewer.
        '''
        if self.size < n:
            return None
        return [self.pop() for _ in range(n)]

    def peek(self):
        '''
        Return top of the stack without removing it, or None if empty.
        '''
        if self.isempty():
            return None
        return self._data[self.size - 1]

    def clear(self):
        # Only the count matters; stale values get overwritten on push.
        self.size = 0

    def display(self, slots=DISPLAY_SLOTS):
        '''
        Return fixed height window of (position, value), highest first.

        Position 1 is the top of the stack, position 2 just below it, and so
        on. Positions deeper than the stack read 0.0.
        '''
        return [(position,
                 self._data[self.size - position]
                 if position <= self.size
                 else 0.0)
                for position in range(slots, 0, -1)]
