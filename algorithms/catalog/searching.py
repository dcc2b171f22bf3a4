"""
Searching catalog.  Drivers here take {"array": [...], "target": x}.
"""

from algorithms.meta import AlgoMeta, Complexity


_LINEAR_PY = """\
def linear_search(arr, target):
    for i in range(len(arr)):
        if arr[i] == target:
            return i
    return -1"""

_LINEAR_JS = """\
function linearSearch(arr, target) {
  for (let i = 0; i < arr.length; i++) {
    if (arr[i] === target) {
      return i;
    }
  }
  return -1;
}"""

_LINEAR_JAVA = """\
public static int linearSearch(int[] arr, int target) {
    for (int i = 0; i < arr.length; i++) {
        if (arr[i] == target) {
            return i;
        }
    }
    return -1;
}"""

_LINEAR_CPP = """\
int linearSearch(vector<int>& arr, int target) {
    for (int i = 0; i < (int) arr.size(); i++) {
        if (arr[i] == target) {
            return i;
        }
    }
    return -1;
}"""


_BINARY_PY = """\
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

    return -1"""

_BINARY_JS = """\
function binarySearch(arr, target) {
  let left = 0;
  let right = arr.length - 1;

  while (left <= right) {
    const mid = Math.floor((left + right) / 2);

    if (arr[mid] === target) {
      return mid;
    } else if (arr[mid] < target) {
      left = mid + 1;
    } else {
      right = mid - 1;
    }
  }

  return -1;
}"""

_BINARY_JAVA = """\
public static int binarySearch(int[] arr, int target) {
    int left = 0;
    int right = arr.length - 1;

    while (left <= right) {
        int mid = left + (right - left) / 2;

        if (arr[mid] == target) {
            return mid;
        } else if (arr[mid] < target) {
            left = mid + 1;
        } else {
            right = mid - 1;
        }
    }

    return -1;
}"""

_BINARY_CPP = """\
int binarySearch(vector<int>& arr, int target) {
    int left = 0;
    int right = arr.size() - 1;

    while (left <= right) {
        int mid = left + (right - left) / 2;

        if (arr[mid] == target) {
            return mid;
        } else if (arr[mid] < target) {
            left = mid + 1;
        } else {
            right = mid - 1;
        }
    }

    return -1;
}"""


ALGORITHMS = [

    AlgoMeta(
        slug="linear-search", title="Linear Search", topic="searching",
        module="algorithms.linear_search", entry="linear_search", input_kind="search",
        summary="Checks every element of the array in order until the target is found.",
        pseudocode=(
            "for i = 0 to n-1",
            "  if arr[i] == target",
            "    return i",
            "return -1",
        ),
        complexity=Complexity("O(1)", "O(n)", "O(n)", "O(1)"),
        about="Scans the array front to back; works on unsorted data.",
        pros=("Simple", "Works on unsorted arrays", "No preprocessing"),
        cons=("O(n) per lookup", "Wasteful for repeated searches"),
        code={"python": _LINEAR_PY, "javascript": _LINEAR_JS, "java": _LINEAR_JAVA, "cpp": _LINEAR_CPP},
        code_line_map={
            "python":     (2, 3, 4, 5),
            "javascript": (2, 3, 4, 7),
            "java":       (2, 3, 4, 7),
            "cpp":        (2, 3, 4, 7),
        },
    ),

    AlgoMeta(
        slug="binary-search", title="Binary Search", topic="searching",
        module="algorithms.binary_search", entry="binary_search", input_kind="search",
        summary="Finds a target in a sorted array by repeatedly halving the search interval.",
        pseudocode=(
            "left = 0, right = n-1",
            "while left <= right",
            "  mid = (left + right) / 2",
            "  if arr[mid] == target",
            "    return mid",
            "  else if arr[mid] < target",
            "    left = mid + 1",
            "  else",
            "    right = mid - 1",
            "return -1",
        ),
        complexity=Complexity("O(1)", "O(log n)", "O(log n)", "O(1)"),
        about="Compares the target with the middle element and discards the half that cannot hold it.",
        pros=("O(log n) lookups", "Simple loop"),
        cons=("Requires sorted input", "Needs random access"),
        code={"python": _BINARY_PY, "javascript": _BINARY_JS, "java": _BINARY_JAVA, "cpp": _BINARY_CPP},
        code_line_map={
            "python":     (2, 4, 5, 7, 8, 9, 10, 11, 12, 14),
            "javascript": (2, 5, 6, 8, 9, 10, 11, 12, 13, 17),
            "java":       (2, 5, 6, 8, 9, 10, 11, 12, 13, 17),
            "cpp":        (2, 5, 6, 8, 9, 10, 11, 12, 13, 17),
        },
    ),
]
