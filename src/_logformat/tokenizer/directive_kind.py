from enum import Enum, auto, unique


@unique
class DirectiveKind(Enum):
    LITERAL = auto()
    CLIENT_IP = auto()
    PEER_IP = auto()
    LOCAL_IP = auto()
    RES_SIZE_EXCLUDING_HEADERS = auto()
    RES_SIZE = auto()
    COOKIE = auto()
    REQ_TIME = auto()
    ENV_VAR = auto()
    FILENAME = auto()
    HOSTNAME = auto()
    PROTOCOL = auto()
    REQ_HEADER = auto()
    KEEP_ALIVE = auto()
    LOGNAME = auto()
    ERR_ID = auto()
    METHOD = auto()
    NOTE = auto()
    RES_HEADER = auto()
    PORT = auto()
    PID = auto()
    QUERY = auto()
    REQ_FIRST_LINE = auto()
    RES_HANDLER = auto()
    STATUS = auto()
    FINAL_STATUS = auto()
    REQ_RECV_TIME = auto()
    REQ_SERVE_TIME = auto()
    USER = auto()
    PATH = auto()
    SERVER_NAME = auto()
    CANONICAL_SERVER_NAME = auto()
    RES_STATUS = auto()
    SIZE_RECEIVED = auto()
    SIZE_SENT = auto()
    SIZE = auto()
    REQ_TRAILER = auto()
    RES_TRAILER = auto()

    @classmethod
    def named_markers(cls):
        """
        The kinds taking a name in braces, mapped to the marker following
        the closing brace, eg. '%{User-Agent}i' is a REQ_HEADER. Ordered
        in the order the tokenizer tries them.
        """
        return {
            cls.COOKIE: "C",
            cls.ENV_VAR: "e",
            cls.REQ_HEADER: "i",
            cls.NOTE: "n",
            cls.RES_HEADER: "o",
            cls.REQ_TRAILER: "^ti",
            cls.RES_TRAILER: "^to",
        }

    @classmethod
    def text_parameterized(cls):
        return (cls.LITERAL, *cls.named_markers())


@unique
class PortType(Enum):
    CANONICAL = "canonical"
    LOCAL = "local"
    REMOTE = "remote"


@unique
class PIDType(Enum):
    PID = "pid"
    TID = "tid"
    HEXTID = "hextid"
