"""Source snippets exercising each branch of the rule cascade."""

MERGE_SORT = """
def merge_sort(arr):
    if len(arr) <= 1:
        return arr
    mid = len(arr) // 2
    left = merge_sort(arr[:mid])
    right = merge_sort(arr[mid:])
    return merge(left, right)
"""

FIBONACCI = """
def fib(n):
    if n <= 1:
        return n
    return fib(n - 1) + fib(n - 2)
"""

BINARY_SEARCH = """
def binary_search(arr, target):
    left, right = 0, len(arr) - 1
    while left <= right:
        mid = (left + right) // 2
        if arr[mid] == target:
            return mid
        elif arr[mid] < target:
            left = mid + 1
        else:
            right = mid - 1
    return -1
"""

LINEAR_SEARCH = """
def find_index(items, target):
    for i, item in enumerate(items):
        if item == target:
            return i
    return -1
"""

BUILTIN_SORT = """
data = sorted(values)
print(data)
"""

TWO_LOOPS = """
for i in range(n):
    print(i)
for j in range(n):
    print(j)
"""

SINGLE_LOOP = """
total = 0
for value in values:
    total += value
"""

CONSTANT = """
x = 1
y = x + 2
"""
