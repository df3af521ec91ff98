from fibheap.fibonacci_heap.fibonacci_heap import (
    FibonacciHeap,
    FibonacciNode,
    HeapError,
    InvalidKeyError,
    NodeNotFoundError,
)
from fibheap.fibonacci_heap.topk import heapsort, nsmallest
from fibheap.graph.dijkstra import dijkstra
