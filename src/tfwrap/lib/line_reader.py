READ_SIZE = 4096


def iter_lines(stream, delimiter=b'\n', read_size=READ_SIZE):
    '''
    Lazily yield chunks from a binary stream
    ---------------------------------

    Every chunk ends with the delimiter, except the last one when
    the input is not terminated. Stops on the first empty read.
    Bytes are returned untouched, decoding is up to the caller.
    '''
    if not isinstance(delimiter, bytes) or len(delimiter) != 1:
        raise ValueError('delimiter must be a single byte')

    pending = b''
    while True:
        data = stream.read(read_size)
        if not data:
            break
        pending += data
        start = 0
        end = pending.find(delimiter, start)
        while end != -1:
            yield pending[start:end + 1]
            start = end + 1
            end = pending.find(delimiter, start)
        pending = pending[start:]

    if pending:
        yield pending
