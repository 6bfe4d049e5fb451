"""Graph algorithms: course ordering and connected components."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence


def can_finish(num_courses: int, prerequisites: Sequence[Sequence[int]]) -> bool:
    """Return True when every course can be taken given [course, prerequisite] pairs."""
    followers: list[list[int]] = [[] for _ in range(num_courses)]
    indegree = [0] * num_courses
    for course, required in prerequisites:
        followers[required].append(course)
        indegree[course] += 1

    ready = deque(course for course, degree in enumerate(indegree) if degree == 0)
    completed = 0
    while ready:
        course = ready.popleft()
        completed += 1
        for follower in followers[course]:
            indegree[follower] -= 1
            if indegree[follower] == 0:
                ready.append(follower)
    return completed == num_courses


def find_circle_num(is_connected: Sequence[Sequence[int]]) -> int:
    """Return the number of connected groups in an adjacency matrix of 0s and 1s."""
    size = len(is_connected)
    visited = [False] * size
    provinces = 0
    for start in range(size):
        if visited[start]:
            continue
        provinces += 1
        visited[start] = True
        stack = [start]
        while stack:
            city = stack.pop()
            for other, linked in enumerate(is_connected[city]):
                if linked == 1 and not visited[other]:
                    visited[other] = True
                    stack.append(other)
    return provinces