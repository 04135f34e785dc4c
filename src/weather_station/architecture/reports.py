#!/usr/bin/env python3
"""
Decorator Pattern Implementation
Composable text reports built by wrapping a base report in layers
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Callable, List, Optional, Sequence, Type
import time
import logging

logger = logging.getLogger(__name__)

Clock = Callable[[], Any]

DEFAULT_HEADER = "Weather Report Header"
DEFAULT_FOOTER = "Weather Report Footer"

def system_clock() -> int:
    """Current time in epoch milliseconds"""
    return int(time.time() * 1000)

class TextNode(ABC):
    """Anything that renders to a string"""

    @abstractmethod
    def render(self) -> str:
        pass

class TextReport(TextNode):
    """Leaf node holding a fixed string"""

    def __init__(self, content: str):
        self.content = content

    def render(self) -> str:
        return self.content

    def __repr__(self) -> str:
        return f"TextReport({self.content!r})"

class ReportDecorator(TextNode):
    """Node transforming the output of exactly one wrapped node"""

    def __init__(self, wrapped: TextNode):
        if wrapped is None:
            raise ValueError(f"{type(self).__name__} requires a wrapped report")
        if not isinstance(wrapped, TextNode):
            raise TypeError(f"Expected TextNode, got {type(wrapped).__name__}")
        self.wrapped = wrapped

    def render(self) -> str:
        return self.transform(self.wrapped.render())

    @abstractmethod
    def transform(self, text: str) -> str:
        """Alter the wrapped node's rendered output"""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.wrapped!r})"

class HeaderDecorator(ReportDecorator):
    """Prepends a header line"""

    def __init__(self, wrapped: TextNode, header: str = DEFAULT_HEADER):
        super().__init__(wrapped)
        self.header = header

    def transform(self, text: str) -> str:
        return f"{self.header}\n{text}"

class FooterDecorator(ReportDecorator):
    """Appends a footer line"""

    def __init__(self, wrapped: TextNode, footer: str = DEFAULT_FOOTER):
        super().__init__(wrapped)
        self.footer = footer

    def transform(self, text: str) -> str:
        return f"{text}\n{self.footer}"

class TimestampDecorator(ReportDecorator):
    """Appends a timestamp line, reading the clock on every render"""

    def __init__(self, wrapped: TextNode, clock: Optional[Clock] = None):
        super().__init__(wrapped)
        self.clock = clock or system_clock

    def transform(self, text: str) -> str:
        return f"{text}\nTimestamp: {self.clock()}"

DECORATOR_REGISTRY: Dict[str, Type[ReportDecorator]] = {
    'header': HeaderDecorator,
    'footer': FooterDecorator,
    'timestamp': TimestampDecorator
}

def decorate(node: TextNode,
             layers: Sequence[str],
             clock: Optional[Clock] = None,
             header: str = DEFAULT_HEADER,
             footer: str = DEFAULT_FOOTER) -> TextNode:
    """
    Wrap a node in named layers

    Args:
        node: Innermost node
        layers: Layer names applied innermost first ('header', 'footer', 'timestamp')
        clock: Time source for timestamp layers
        header: Header line for header layers
        footer: Footer line for footer layers

    Returns:
        The outermost node
    """
    for layer in layers:
        if layer not in DECORATOR_REGISTRY:
            available = ', '.join(DECORATOR_REGISTRY.keys())
            raise ValueError(f"Unknown report layer: {layer}. Available: {available}")

        if layer == 'header':
            node = HeaderDecorator(node, header=header)
        elif layer == 'footer':
            node = FooterDecorator(node, footer=footer)
        else:
            node = TimestampDecorator(node, clock=clock)

    logger.debug(f"Built report chain: {node!r}")
    return node

def chain_of(node: TextNode) -> List[TextNode]:
    """Nodes of a chain from the leaf outward"""
    nodes = [node]
    while isinstance(node, ReportDecorator):
        node = node.wrapped
        nodes.append(node)
    return list(reversed(nodes))

def render_stages(node: TextNode) -> List[str]:
    """Rendered output of every stage of a chain, leaf first"""
    return [stage.render() for stage in chain_of(node)]
