"""
Array basics catalog.
"""

from algorithms.meta import AlgoMeta, Complexity


_MAX_PY = """\
def find_maximum(arr):
    max_val = arr[0]
    max_index = 0
    for i in range(1, len(arr)):
        if arr[i] > max_val:
            max_val = arr[i]
            max_index = i
    return max_val, max_index"""

_MAX_JS = """\
function findMaximum(arr) {
  let max = arr[0];
  let maxIndex = 0;
  for (let i = 1; i < arr.length; i++) {
    if (arr[i] > max) {
      max = arr[i];
      maxIndex = i;
    }
  }
  return { value: max, index: maxIndex };
}"""

_MAX_JAVA = """\
public static int[] findMaximum(int[] arr) {
    int max = arr[0];
    int maxIndex = 0;
    for (int i = 1; i < arr.length; i++) {
        if (arr[i] > max) {
            max = arr[i];
            maxIndex = i;
        }
    }
    return new int[]{max, maxIndex};
}"""

_MAX_CPP = """\
pair<int, int> findMaximum(vector<int>& arr) {
    int maxVal = arr[0];
    int maxIndex = 0;
    for (int i = 1; i < (int) arr.size(); i++) {
        if (arr[i] > maxVal) {
            maxVal = arr[i];
            maxIndex = i;
        }
    }
    return make_pair(maxVal, maxIndex);
}"""


_REVERSE_PY = """\
def reverse_array(arr):
    left, right = 0, len(arr) - 1
    while left < right:
        arr[left], arr[right] = arr[right], arr[left]
        left += 1
        right -= 1
    return arr"""

_REVERSE_JS = """\
function reverseArray(arr) {
  let left = 0;
  let right = arr.length - 1;
  while (left < right) {
    [arr[left], arr[right]] = [arr[right], arr[left]];
    left++;
    right--;
  }
  return arr;
}"""

_REVERSE_JAVA = """\
public static void reverseArray(int[] arr) {
    int left = 0;
    int right = arr.length - 1;
    while (left < right) {
        int temp = arr[left];
        arr[left] = arr[right];
        arr[right] = temp;
        left++;
        right--;
    }
}"""

_REVERSE_CPP = """\
void reverseArray(vector<int>& arr) {
    int left = 0;
    int right = arr.size() - 1;
    while (left < right) {
        swap(arr[left], arr[right]);
        left++;
        right--;
    }
}"""


ALGORITHMS = [

    AlgoMeta(
        slug="find-maximum", title="Find Maximum", topic="arrays",
        module="algorithms.find_maximum", entry="find_maximum",
        summary="Finds the largest element by comparing each element with the running maximum.",
        pseudocode=(
            "max = arr[0]",
            "maxIndex = 0",
            "for i = 1 to n-1",
            "  if arr[i] > max",
            "    max = arr[i]",
            "    maxIndex = i",
            "return max, maxIndex",
        ),
        complexity=Complexity("O(n)", "O(n)", "O(n)", "O(1)"),
        about="One pass over the array, remembering the largest value seen and where it was.",
        pros=("Single pass", "Constant extra space"),
        cons=("Must visit every element of an unsorted array",),
        code={"python": _MAX_PY, "javascript": _MAX_JS, "java": _MAX_JAVA, "cpp": _MAX_CPP},
        code_line_map={
            "python":     (2, 3, 4, 5, 6, 7, 8),
            "javascript": (2, 3, 4, 5, 6, 7, 10),
            "java":       (2, 3, 4, 5, 6, 7, 10),
            "cpp":        (2, 3, 4, 5, 6, 7, 10),
        },
    ),

    AlgoMeta(
        slug="reverse-array", title="Reverse Array", topic="arrays",
        module="algorithms.reverse_array", entry="reverse_array",
        summary="Reverses an array in-place with two pointers moving towards the center.",
        pseudocode=(
            "left = 0",
            "right = n-1",
            "while left < right",
            "  swap arr[left] and arr[right]",
            "  left = left + 1",
            "  right = right - 1",
        ),
        complexity=Complexity("O(n)", "O(n)", "O(n)", "O(1)", in_place=True),
        about="Swaps the outermost pair, then moves both pointers one step inwards.",
        pros=("In-place", "Optimal O(n)"),
        cons=("Modifies the array it is given",),
        code={"python": _REVERSE_PY, "javascript": _REVERSE_JS, "java": _REVERSE_JAVA, "cpp": _REVERSE_CPP},
        code_line_map={
            "python":     (2, 2, 3, 4, 5, 6),
            "javascript": (2, 3, 4, 5, 6, 7),
            "java":       (2, 3, 4, 5, 8, 9),
            "cpp":        (2, 3, 4, 5, 6, 7),
        },
    ),
]
