from skynet.graph import Graph
from skynet.policy import NO_LINK, find_sever_link
