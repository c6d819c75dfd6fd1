import socket
import logging

logger = logging.getLogger("rawcli")

PORT = 12013
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"
DATAGRAM_SIZE = 1024


class UDPHandler(logging.Handler):
    """Send log records to a listening process over UDP.

    The prompt lives on stderr, so log messages written there would mess
    up the line being edited.
    """

    udp_address = ("127.0.0.1", PORT)

    def __init__(self):
        super().__init__()
        self.setFormatter(logging.Formatter(LOG_FORMAT))
        self._socket = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)

    def emit(self, record):
        data = self.format(record).encode()
        # Keep datagrams small, a long traceback is sent in pieces
        for i in range(0, len(data), DATAGRAM_SIZE):
            self._socket.sendto(data[i : i + DATAGRAM_SIZE], self.udp_address)

    def close(self):
        self._socket.close()
        super().close()


def enable_log_forwarding(level=logging.INFO):
    """Forward the rawcli logs to the process started with ``rawcli --listen``."""
    for handler in logger.handlers:
        if isinstance(handler, UDPHandler):
            break
    else:
        handler = UDPHandler()
        logger.addHandler(handler)
    logger.setLevel(level)
    return handler


def listen_to_logs():
    """Called from ``rawcli --listen``.

    This way we can see the logs from another process, so it does not get
    mixed up with the line being edited.
    """

    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(("127.0.0.1", PORT))
    print(f"Listening for rawcli logs on port {PORT}, ctrl-c to stop.")

    while True:
        data, addr = sock.recvfrom(2**20)
        print(data.decode())
