import time

from fibheap import FibonacciHeap, dijkstra, nsmallest

N = 1000


def timed(label, fn):
    start = time.perf_counter()
    fn()
    print(f"{label:<14} {(time.perf_counter() - start) * 1e3:8.3f} ms")


def bench_insert():
    heap = FibonacciHeap()
    for i in range(N):
        heap.insert(i)


def bench_extract_min():
    heap = FibonacciHeap()
    for i in range(N):
        heap.insert(i)
    for _ in range(N):
        heap.extract_min()


def bench_decrease_key():
    heap = FibonacciHeap()
    nodes = [heap.insert(i) for i in range(N)]
    for node in nodes:
        heap.decrease_key(node, node.key // 2)


def bench_merge():
    heap_a = FibonacciHeap()
    for i in range(N // 2):
        heap_a.insert(i)
    heap_b = FibonacciHeap()
    for i in range(N // 2, N):
        heap_b.insert(i)
    heap_a.merge(heap_b)


print("Creating heap...")
heap = FibonacciHeap()
handle = heap.insert(10)
heap.insert(5)
print(f"Heap size: {len(heap)}")
print(f"Is empty: {heap.is_empty()}")
print(f"Minimum: {heap.peek_min()}")

heap.decrease_key(handle, 3)
print(f"Minimum after decrease_key: {heap.peek_min()}")
print(f"Smallest three of [7, 2, 9, 4]: {nsmallest([7, 2, 9, 4], 3)}")

graph = {
    "A": [("B", 1), ("C", 4)],
    "B": [("C", 2), ("D", 5)],
    "C": [("D", 1)],
    "D": [],
}
print(f"Shortest distances from A: {dijkstra(graph, 'A')}")

print(f"\nTimings over {N} keys:")
timed("insert", bench_insert)
timed("extract_min", bench_extract_min)
timed("decrease_key", bench_decrease_key)
timed("merge", bench_merge)
