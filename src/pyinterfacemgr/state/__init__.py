"""State layer.

Plain, lock-free building blocks owned by :class:`pyinterfacemgr.worker.InterfaceWorker`:
the driver table, the readiness gate and the broken-bond alert policy.
Serialisation of access is the worker's job, not theirs.
"""
