"""
Sorting catalog.

code_line_map[lang][N-1] is the line of code[lang] that implements
pseudocode line N.
"""

from algorithms.meta import AlgoMeta, Complexity


# ---------------------------------------------------------------------------
# Bubble Sort
# ---------------------------------------------------------------------------
_BUBBLE_PY = """\
def bubble_sort(arr):
    n = len(arr)
    for i in range(n - 1):
        for j in range(n - i - 1):
            if arr[j] > arr[j + 1]:
                arr[j], arr[j + 1] = arr[j + 1], arr[j]
    return arr"""

_BUBBLE_JS = """\
function bubbleSort(arr) {
  const n = arr.length;
  for (let i = 0; i < n - 1; i++) {
    for (let j = 0; j < n - i - 1; j++) {
      if (arr[j] > arr[j + 1]) {
        [arr[j], arr[j + 1]] = [arr[j + 1], arr[j]];
      }
    }
  }
  return arr;
}"""

_BUBBLE_JAVA = """\
public static void bubbleSort(int[] arr) {
    int n = arr.length;
    for (int i = 0; i < n - 1; i++) {
        for (int j = 0; j < n - i - 1; j++) {
            if (arr[j] > arr[j + 1]) {
                int temp = arr[j];
                arr[j] = arr[j + 1];
                arr[j + 1] = temp;
            }
        }
    }
}"""

_BUBBLE_CPP = """\
void bubbleSort(vector<int>& arr) {
    int n = arr.size();
    for (int i = 0; i < n - 1; i++) {
        for (int j = 0; j < n - i - 1; j++) {
            if (arr[j] > arr[j + 1]) {
                swap(arr[j], arr[j + 1]);
            }
        }
    }
}"""


# ---------------------------------------------------------------------------
# Selection Sort
# ---------------------------------------------------------------------------
_SELECTION_PY = """\
def selection_sort(arr):
    n = len(arr)
    for i in range(n - 1):
        min_index = i
        for j in range(i + 1, n):
            if arr[j] < arr[min_index]:
                min_index = j
        arr[i], arr[min_index] = arr[min_index], arr[i]
    return arr"""

_SELECTION_JS = """\
function selectionSort(arr) {
  const n = arr.length;
  for (let i = 0; i < n - 1; i++) {
    let minIndex = i;
    for (let j = i + 1; j < n; j++) {
      if (arr[j] < arr[minIndex]) {
        minIndex = j;
      }
    }
    [arr[i], arr[minIndex]] = [arr[minIndex], arr[i]];
  }
  return arr;
}"""

_SELECTION_JAVA = """\
public static void selectionSort(int[] arr) {
    int n = arr.length;
    for (int i = 0; i < n - 1; i++) {
        int minIndex = i;
        for (int j = i + 1; j < n; j++) {
            if (arr[j] < arr[minIndex]) {
                minIndex = j;
            }
        }
        int temp = arr[i];
        arr[i] = arr[minIndex];
        arr[minIndex] = temp;
    }
}"""

_SELECTION_CPP = """\
void selectionSort(vector<int>& arr) {
    int n = arr.size();
    for (int i = 0; i < n - 1; i++) {
        int minIndex = i;
        for (int j = i + 1; j < n; j++) {
            if (arr[j] < arr[minIndex]) {
                minIndex = j;
            }
        }
        swap(arr[i], arr[minIndex]);
    }
}"""


# ---------------------------------------------------------------------------
# Insertion Sort
# ---------------------------------------------------------------------------
_INSERTION_PY = """\
def insertion_sort(arr):
    for i in range(1, len(arr)):
        key = arr[i]
        j = i - 1
        while j >= 0 and arr[j] > key:
            arr[j + 1] = arr[j]
            j -= 1
        arr[j + 1] = key
    return arr"""

_INSERTION_JS = """\
function insertionSort(arr) {
  for (let i = 1; i < arr.length; i++) {
    const key = arr[i];
    let j = i - 1;
    while (j >= 0 && arr[j] > key) {
      arr[j + 1] = arr[j];
      j--;
    }
    arr[j + 1] = key;
  }
  return arr;
}"""

_INSERTION_JAVA = """\
public static void insertionSort(int[] arr) {
    for (int i = 1; i < arr.length; i++) {
        int key = arr[i];
        int j = i - 1;
        while (j >= 0 && arr[j] > key) {
            arr[j + 1] = arr[j];
            j--;
        }
        arr[j + 1] = key;
    }
}"""

_INSERTION_CPP = """\
void insertionSort(vector<int>& arr) {
    for (int i = 1; i < (int) arr.size(); i++) {
        int key = arr[i];
        int j = i - 1;
        while (j >= 0 && arr[j] > key) {
            arr[j + 1] = arr[j];
            j--;
        }
        arr[j + 1] = key;
    }
}"""


# ---------------------------------------------------------------------------
# Merge Sort
# ---------------------------------------------------------------------------
_MERGE_PY = """\
def merge_sort(arr, left, right):
    if left < right:
        mid = (left + right) // 2
        merge_sort(arr, left, mid)
        merge_sort(arr, mid + 1, right)
        merge(arr, left, mid, right)


def merge(arr, left, mid, right):
    L, R = arr[left:mid + 1], arr[mid + 1:right + 1]
    i = j = 0
    k = left
    while i < len(L) and j < len(R):
        if L[i] <= R[j]:
            arr[k] = L[i]
            i += 1
        else:
            arr[k] = R[j]
            j += 1
        k += 1
    for value in L[i:] + R[j:]:
        arr[k] = value
        k += 1"""

_MERGE_JS = """\
function mergeSort(arr, left, right) {
  if (left < right) {
    const mid = Math.floor((left + right) / 2);
    mergeSort(arr, left, mid);
    mergeSort(arr, mid + 1, right);
    merge(arr, left, mid, right);
  }
}

function merge(arr, left, mid, right) {
  const L = arr.slice(left, mid + 1);
  const R = arr.slice(mid + 1, right + 1);
  let i = 0, j = 0, k = left;
  while (i < L.length && j < R.length) {
    arr[k++] = L[i] <= R[j] ? L[i++] : R[j++];
  }
  while (i < L.length) arr[k++] = L[i++];
  while (j < R.length) arr[k++] = R[j++];
}"""

_MERGE_JAVA = """\
public static void mergeSort(int[] arr, int left, int right) {
    if (left < right) {
        int mid = left + (right - left) / 2;
        mergeSort(arr, left, mid);
        mergeSort(arr, mid + 1, right);
        merge(arr, left, mid, right);
    }
}

public static void merge(int[] arr, int left, int mid, int right) {
    int[] L = Arrays.copyOfRange(arr, left, mid + 1);
    int[] R = Arrays.copyOfRange(arr, mid + 1, right + 1);
    int i = 0, j = 0, k = left;
    while (i < L.length && j < R.length) {
        arr[k++] = L[i] <= R[j] ? L[i++] : R[j++];
    }
    while (i < L.length) arr[k++] = L[i++];
    while (j < R.length) arr[k++] = R[j++];
}"""

_MERGE_CPP = """\
void mergeSort(vector<int>& arr, int left, int right) {
    if (left < right) {
        int mid = left + (right - left) / 2;
        mergeSort(arr, left, mid);
        mergeSort(arr, mid + 1, right);
        merge(arr, left, mid, right);
    }
}

void merge(vector<int>& arr, int left, int mid, int right) {
    vector<int> L(arr.begin() + left, arr.begin() + mid + 1);
    vector<int> R(arr.begin() + mid + 1, arr.begin() + right + 1);
    size_t i = 0, j = 0;
    int k = left;
    while (i < L.size() && j < R.size()) {
        arr[k++] = L[i] <= R[j] ? L[i++] : R[j++];
    }
    while (i < L.size()) arr[k++] = L[i++];
    while (j < R.size()) arr[k++] = R[j++];
}"""


# ---------------------------------------------------------------------------
# Quick Sort
# ---------------------------------------------------------------------------
_QUICK_PY = """\
def quick_sort(arr, low, high):
    if low < high:
        pivot_index = partition(arr, low, high)
        quick_sort(arr, low, pivot_index - 1)
        quick_sort(arr, pivot_index + 1, high)


def partition(arr, low, high):
    pivot, i = arr[high], low - 1
    for j in range(low, high):
        if arr[j] < pivot:
            i += 1
            arr[i], arr[j] = arr[j], arr[i]
    arr[i + 1], arr[high] = arr[high], arr[i + 1]
    return i + 1"""

_QUICK_JS = """\
function quickSort(arr, low, high) {
  if (low < high) {
    const pivotIndex = partition(arr, low, high);
    quickSort(arr, low, pivotIndex - 1);
    quickSort(arr, pivotIndex + 1, high);
  }
}

function partition(arr, low, high) {
  const pivot = arr[high];
  let i = low - 1;
  for (let j = low; j < high; j++) {
    if (arr[j] < pivot) {
      i++;
      [arr[i], arr[j]] = [arr[j], arr[i]];
    }
  }
  [arr[i + 1], arr[high]] = [arr[high], arr[i + 1]];
  return i + 1;
}"""

_QUICK_JAVA = """\
public static void quickSort(int[] arr, int low, int high) {
    if (low < high) {
        int pivotIndex = partition(arr, low, high);
        quickSort(arr, low, pivotIndex - 1);
        quickSort(arr, pivotIndex + 1, high);
    }
}

public static int partition(int[] arr, int low, int high) {
    int pivot = arr[high];
    int i = low - 1;
    for (int j = low; j < high; j++) {
        if (arr[j] < pivot) {
            i++;
            int temp = arr[i];
            arr[i] = arr[j];
            arr[j] = temp;
        }
    }
    int temp = arr[i + 1];
    arr[i + 1] = arr[high];
    arr[high] = temp;
    return i + 1;
}"""

_QUICK_CPP = """\
void quickSort(vector<int>& arr, int low, int high) {
    if (low < high) {
        int pivotIndex = partition(arr, low, high);
        quickSort(arr, low, pivotIndex - 1);
        quickSort(arr, pivotIndex + 1, high);
    }
}

int partition(vector<int>& arr, int low, int high) {
    int pivot = arr[high];
    int i = low - 1;
    for (int j = low; j < high; j++) {
        if (arr[j] < pivot) {
            i++;
            swap(arr[i], arr[j]);
        }
    }
    swap(arr[i + 1], arr[high]);
    return i + 1;
}"""


# ---------------------------------------------------------------------------
# THE CATALOG
# ---------------------------------------------------------------------------
ALGORITHMS = [

    AlgoMeta(
        slug="bubble-sort", title="Bubble Sort", topic="sorting",
        module="algorithms.bubble_sort", entry="bubble_sort",
        summary=(
            "Repeatedly steps through the list, compares adjacent elements "
            "and swaps them if they are in the wrong order."
        ),
        pseudocode=(
            "for i = 0 to n-2",
            "  for j = 0 to n-i-2",
            "    if arr[j] > arr[j+1]",
            "      swap arr[j] and arr[j+1]",
        ),
        complexity=Complexity("O(n)", "O(n²)", "O(n²)", "O(1)", stable=True, in_place=True),
        about=(
            "Each pass bubbles the largest remaining element to the end of "
            "the unsorted region by swapping adjacent out-of-order pairs."
        ),
        pros=("Simple to understand and implement", "Stable", "In-place"),
        cons=("O(n²) comparisons", "Not suitable for large datasets"),
        code={"python": _BUBBLE_PY, "javascript": _BUBBLE_JS, "java": _BUBBLE_JAVA, "cpp": _BUBBLE_CPP},
        code_line_map={
            "python":     (3, 4, 5, 6),
            "javascript": (3, 4, 5, 6),
            "java":       (3, 4, 5, 6),
            "cpp":        (3, 4, 5, 6),
        },
    ),

    AlgoMeta(
        slug="selection-sort", title="Selection Sort", topic="sorting",
        module="algorithms.selection_sort", entry="selection_sort",
        summary=(
            "Divides the list into a sorted and an unsorted region and "
            "repeatedly moves the smallest unsorted element to the front."
        ),
        pseudocode=(
            "for i = 0 to n-2",
            "  minIndex = i",
            "  for j = i+1 to n-1",
            "    if arr[j] < arr[minIndex]",
            "      minIndex = j",
            "  swap arr[i] and arr[minIndex]",
        ),
        complexity=Complexity("O(n²)", "O(n²)", "O(n²)", "O(1)", stable=False, in_place=True),
        about="Finds the minimum of the unsorted suffix and places it at the beginning.",
        pros=("Simple implementation", "In-place", "At most n-1 swaps"),
        cons=("O(n²) comparisons even on sorted input", "Not stable"),
        code={"python": _SELECTION_PY, "javascript": _SELECTION_JS, "java": _SELECTION_JAVA, "cpp": _SELECTION_CPP},
        code_line_map={
            "python":     (3, 4, 5, 6, 7, 8),
            "javascript": (3, 4, 5, 6, 7, 10),
            "java":       (3, 4, 5, 6, 7, 10),
            "cpp":        (3, 4, 5, 6, 7, 10),
        },
    ),

    AlgoMeta(
        slug="insertion-sort", title="Insertion Sort", topic="sorting",
        module="algorithms.insertion_sort", entry="insertion_sort",
        summary="Builds the final sorted array one item at a time.",
        pseudocode=(
            "for i = 1 to n-1",
            "  key = arr[i]",
            "  j = i - 1",
            "  while j >= 0 and arr[j] > key",
            "    arr[j+1] = arr[j]",
            "    j = j - 1",
            "  arr[j+1] = key",
        ),
        complexity=Complexity("O(n)", "O(n²)", "O(n²)", "O(1)", stable=True, in_place=True),
        about=(
            "Takes each element in turn and shifts larger elements of the "
            "sorted prefix right until the element's slot opens up."
        ),
        pros=("Efficient for small or nearly sorted data", "Adaptive", "Stable", "In-place"),
        cons=("O(n²) on reversed input", "More writes than selection sort"),
        code={"python": _INSERTION_PY, "javascript": _INSERTION_JS, "java": _INSERTION_JAVA, "cpp": _INSERTION_CPP},
        code_line_map={
            "python":     (2, 3, 4, 5, 6, 7, 8),
            "javascript": (2, 3, 4, 5, 6, 7, 9),
            "java":       (2, 3, 4, 5, 6, 7, 9),
            "cpp":        (2, 3, 4, 5, 6, 7, 9),
        },
    ),

    AlgoMeta(
        slug="merge-sort", title="Merge Sort", topic="sorting",
        module="algorithms.merge_sort", entry="merge_sort",
        summary="An efficient, stable, divide-and-conquer sorting algorithm.",
        pseudocode=(
            "if left < right",
            "  mid = (left + right) / 2",
            "  mergeSort(arr, left, mid)",
            "  mergeSort(arr, mid+1, right)",
            "  merge(arr, left, mid, right)",
            "merge: L = arr[left..mid], R = arr[mid+1..right]",
            "  while L and R both have elements",
            "    arr[k] = smaller head (L wins ties), k = k + 1",
            "  copy what is left of L, then of R, into arr[k..]",
        ),
        complexity=Complexity(
            "O(n log n)", "O(n log n)", "O(n log n)", "O(n)", stable=True, in_place=False,
        ),
        about="Splits the array into halves, sorts each half, then merges them back together.",
        pros=("Guaranteed O(n log n)", "Stable", "Predictable performance"),
        cons=("Needs O(n) extra space", "Not in-place"),
        code={"python": _MERGE_PY, "javascript": _MERGE_JS, "java": _MERGE_JAVA, "cpp": _MERGE_CPP},
        code_line_map={
            "python":     (2, 3, 4, 5, 6, 10, 13, 14, 21),
            "javascript": (2, 3, 4, 5, 6, 11, 14, 15, 17),
            "java":       (2, 3, 4, 5, 6, 11, 14, 15, 17),
            "cpp":        (2, 3, 4, 5, 6, 11, 15, 16, 18),
        },
    ),

    AlgoMeta(
        slug="quick-sort", title="Quick Sort", topic="sorting",
        module="algorithms.quick_sort", entry="quick_sort",
        summary="Divide-and-conquer sort that partitions the array around a pivot element.",
        pseudocode=(
            "if low < high",
            "  pivotIndex = partition(arr, low, high)",
            "  quickSort(arr, low, pivotIndex-1)",
            "  quickSort(arr, pivotIndex+1, high)",
            "partition(arr, low, high):",
            "  pivot = arr[high], i = low - 1",
            "  for j = low to high-1",
            "    if arr[j] < pivot",
            "      i = i + 1, swap arr[i] and arr[j]",
            "  swap arr[i+1] and arr[high]",
            "  return i + 1",
        ),
        complexity=Complexity(
            "O(n log n)", "O(n log n)", "O(n²)", "O(log n)", stable=False, in_place=True,
        ),
        about=(
            "Picks the last element as pivot, moves every smaller element in "
            "front of it, then sorts both sides of the pivot the same way."
        ),
        pros=("Fast in practice", "In-place", "Cache friendly"),
        cons=("O(n²) on already sorted input with this pivot rule", "Not stable"),
        code={"python": _QUICK_PY, "javascript": _QUICK_JS, "java": _QUICK_JAVA, "cpp": _QUICK_CPP},
        code_line_map={
            "python":     (2, 3, 4, 5, 8, 9, 10, 11, 12, 14, 15),
            "javascript": (2, 3, 4, 5, 9, 10, 12, 13, 14, 18, 19),
            "java":       (2, 3, 4, 5, 9, 10, 12, 13, 14, 20, 23),
            "cpp":        (2, 3, 4, 5, 9, 10, 12, 13, 14, 18, 19),
        },
    ),
]
